"""
Main CLI application logic.
Combines Engine and UI into a typed conversation.
"""
import argparse

from .app_logger import setup_logging
from .config import (
    DEFAULT_SKILL, FOLLOW_UP_PHRASES, HELP_INTENT, HELP_PHRASES, NEXT_INTENT,
    SKILL_PROFILES, STOP_INTENT, STOP_PHRASES
)
from .engine import LAUNCH_REQUEST, CoachEngine, Conversation, Turn
from .errors import CoachError, UnknownSkillError
from .loader import load
from .ui import CoachUI


def get_profile(name):
    try:
        return SKILL_PROFILES[name]
    except KeyError:
        raise UnknownSkillError(
            f"Unknown skill {name!r}, choose one of: {', '.join(sorted(SKILL_PROFILES))}"
        )


def turn_for_input(text, profile):
    """Map a line typed at the prompt onto the intent a voice platform would send."""
    phrase = text.strip().lower()
    if phrase in FOLLOW_UP_PHRASES:
        return Turn(intent=NEXT_INTENT)
    if phrase in HELP_PHRASES:
        return Turn(intent=HELP_INTENT)
    if phrase in STOP_PHRASES:
        return Turn(intent=STOP_INTENT)
    return Turn(intent=profile.lookup_intent, slots={profile.slot_name: text})


def build_parser():
    parser = argparse.ArgumentParser(description="Problem Coach: look up recommendations for an issue.")
    parser.add_argument("--skill", default=DEFAULT_SKILL, choices=sorted(SKILL_PROFILES),
                        help="Skill profile to use (default: %(default)s)")
    parser.add_argument("--kb", default=None, help="Knowledge base JSON file (default: the skill's own)")
    parser.add_argument("--explain", action="store_true", help="Show the ranking table for each lookup")
    parser.add_argument("--log-level", default=None, help="Override COACH_LOG_LEVEL")
    return parser


def run_cli(argv=None):
    """Run the interactive CLI."""
    args = build_parser().parse_args(argv)
    logger = setup_logging(args.log_level)
    ui = CoachUI()

    try:
        profile = get_profile(args.skill)
        ui.print_loading("Loading knowledge base...")
        knowledge_base = load(args.kb or profile.kb_path)
    except CoachError as e:
        logger.error("Startup failed: %s", e)
        ui.print_error("Could not start", str(e))
        return 1

    engine = CoachEngine(profile, knowledge_base)
    ui.print_welcome(profile, len(knowledge_base))
    conversation = Conversation(engine)
    ui.display_reply(conversation.handle(Turn(intent=LAUNCH_REQUEST)))

    try:
        while True:
            text = ui.console.input("[bold cyan]> [/bold cyan]").strip()
            if not text:
                continue

            turn = turn_for_input(text, profile)
            if args.explain and turn.intent == profile.lookup_intent:
                ui.display_candidates(engine.explain(text))

            reply = conversation.handle(turn)
            ui.display_reply(reply)

            if turn.intent == STOP_INTENT:
                break
            if conversation.ended:
                # A fresh session, like reopening the skill
                conversation = Conversation(engine)

    except (KeyboardInterrupt, EOFError):
        ui.console.print("\n[yellow]Interrupted by user.[/yellow]")
    return 0


if __name__ == "__main__":
    raise SystemExit(run_cli())
