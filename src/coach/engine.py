"""
Conversation engine (Headless).
Maps intents onto the lookup and disclosure logic and returns plain replies,
no printing.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from .app_logger import get_logger
from .config import CANCEL_INTENT, HELP_INTENT, NEXT_INTENT, STOP_INTENT
from .errors import MalformedQueryError
from .loader import KnowledgeBase
from .matcher import rank, search
from .session import SessionState, WRONG_INVOCATION, present_first_page, present_follow_up
from .utils import require_tokens, sanitize_text

logger = get_logger("engine")

LAUNCH_REQUEST = 'LaunchRequest'
SESSION_ENDED_REQUEST = 'SessionEndedRequest'


class IntentKind(Enum):
    LAUNCH = 'launch'
    LOOKUP = 'lookup'
    NEXT = 'next'
    HELP = 'help'
    STOP = 'stop'
    SESSION_ENDED = 'session_ended'


@dataclass(frozen=True)
class Turn:
    """One request from the transport: an intent name and its filled slots."""
    intent: str
    slots: Dict[str, str] = field(default_factory=dict)


@dataclass
class Reply:
    status: str
    speech: str = ''
    reprompt: Optional[str] = None
    card_title: Optional[str] = None
    card_content: Optional[str] = None
    should_end_session: bool = True


class CoachEngine:
    """
    One engine per skill profile. The handler table is built once here and
    only read afterwards.
    """
    def __init__(self, profile, knowledge_base: KnowledgeBase, consume_follow_up=True):
        self.profile = profile
        self.knowledge_base = knowledge_base
        self.consume_follow_up = consume_follow_up
        self.intent_names = {
            LAUNCH_REQUEST: IntentKind.LAUNCH,
            profile.lookup_intent: IntentKind.LOOKUP,
            NEXT_INTENT: IntentKind.NEXT,
            HELP_INTENT: IntentKind.HELP,
            STOP_INTENT: IntentKind.STOP,
            CANCEL_INTENT: IntentKind.STOP,
            SESSION_ENDED_REQUEST: IntentKind.SESSION_ENDED,
        }
        self.handlers = {
            IntentKind.LAUNCH: self._on_launch,
            IntentKind.LOOKUP: self._on_lookup,
            IntentKind.NEXT: self._on_follow_up,
            IntentKind.HELP: self._on_help,
            IntentKind.STOP: self._on_stop,
            IntentKind.SESSION_ENDED: self._on_session_ended,
        }

    def resolve(self, intent_name):
        return self.intent_names.get(intent_name)

    def handle(self, turn: Turn, session: SessionState) -> Reply:
        """Dispatch one turn. Unknown intents end the session."""
        kind = self.resolve(turn.intent)
        if kind is None:
            logger.warning("Unknown intent %r for skill %s", turn.intent, self.profile.name)
            return Reply(status='unknown', speech='Unknown intent', should_end_session=True)
        logger.debug("Handling %s (%s) with slots %s", turn.intent, kind.value, turn.slots)
        return self.handlers[kind](turn, session)

    def lookup(self, query):
        return search(self.knowledge_base, query)

    def explain(self, query):
        """Ranked candidates with their weights, for diagnostics."""
        return rank(self.knowledge_base, query)

    def _on_launch(self, turn, session):
        return Reply(
            status='launch',
            speech=self.profile.launch_speech,
            reprompt=self.profile.launch_reprompt,
            should_end_session=False,
        )

    def _on_lookup(self, turn, session):
        profile = self.profile
        query = turn.slots.get(profile.slot_name)
        try:
            require_tokens(query)
        except MalformedQueryError:
            return Reply(
                status='missing',
                speech=f'Looks like you forgot to mention what your {profile.noun} is. What would you like help with? ',
                reprompt=profile.missing_slot_reprompt,
                should_end_session=False,
            )

        results = self.lookup(query)
        label = sanitize_text(query)
        card_title = f'{profile.card_title_prefix}: {label}'
        page = present_first_page(label, results, session)

        if not page.found:
            speech = (
                profile.not_found_speech.format(label=label)
                + f'I can research this {profile.noun} or you can ask me about another {profile.noun}. '
            )
            return Reply(
                status='not_found',
                speech=speech,
                card_title=card_title,
                card_content=speech,
                should_end_session=False,
            )

        closing = (
            f'Would you like help dealing with another {profile.noun}? '
            'Or you can say stop or cancel to end the session. '
        )
        speech = f'{profile.recommendation_intro}{page.primary.text} {closing}'
        card_content = f'{profile.recommendation_intro}{page.primary.text}\n{closing}'
        reprompt = None
        if page.overflow_announced:
            more = (
                profile.more_available_speech
                + 'You can say more information for more information. Or say stop or cancel to end the skill. '
            )
            speech += more
            card_content += more
            reprompt = 'You can say more information or stop.'

        return Reply(
            status='found',
            speech=speech,
            reprompt=reprompt,
            card_title=card_title,
            card_content=card_content,
            should_end_session=False,
        )

    def _on_follow_up(self, turn, session):
        follow_up = present_follow_up(session, consume=self.consume_follow_up)
        if follow_up is WRONG_INVOCATION:
            return Reply(status='wrong_invocation', speech='Wrong invocation of this intent. ')

        noun = self.profile.noun
        speech = f'There are {follow_up.count} ways to deal with this {noun}. Here is another. '
        card_content = f'{speech}\n'
        for entry in follow_up.entries:
            speech += f'{entry.label}. {entry.text} '
            card_content += f"'{entry.label}' {entry.text}\n"

        return Reply(
            status='follow_up',
            speech=speech,
            card_title=f'{self.profile.follow_up_card_prefix}: {follow_up.label}',
            card_content=card_content,
            should_end_session=True,
        )

    def _on_help(self, turn, session):
        noun = self.profile.noun
        return Reply(
            status='help',
            speech=self.profile.help_speech,
            reprompt=f'What {noun} would you like help dealing with? or You can say stop to stop the skill.',
            should_end_session=False,
        )

    def _on_stop(self, turn, session):
        return Reply(status='goodbye', speech='Good Bye. ', should_end_session=True)

    def _on_session_ended(self, turn, session):
        return Reply(status='ended', should_end_session=True)


class Conversation:
    """
    A single session against one engine. Owns its SessionState and drops it
    when a reply ends the session.
    """
    def __init__(self, engine: CoachEngine, session: Optional[SessionState] = None):
        self.engine = engine
        self.session = session if session is not None else SessionState()
        self.ended = False

    @classmethod
    def resume(cls, engine, attributes):
        """Continue a session from the transport's attribute bag."""
        return cls(engine, SessionState.from_attributes(attributes))

    def send(self, intent, **slots):
        return self.handle(Turn(intent=intent, slots=slots))

    def handle(self, turn: Turn) -> Reply:
        reply = self.engine.handle(turn, self.session)
        if reply.should_end_session:
            self.session.clear()
            self.ended = True
        return reply

    def attributes(self):
        """Attribute bag to hand back to the transport while the session is open."""
        if self.ended:
            return {}
        return self.session.to_attributes()
