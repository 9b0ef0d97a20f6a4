"""
Configuration constants for the Problem Coach engine.
"""
import os
from dataclasses import dataclass
from pathlib import Path

# Match Scoring
ANCHOR_MATCH_WEIGHT = 10
TOKEN_COUNT_BONUS = 10
STRONG_MATCH_THRESHOLD = 10

# Pagination (entries spoken on the first turn, end of the follow-up window)
MAX_RESPONSES = 1
MAX_PROBLEMS = 2

# Session attribute keys used by the voice transport
ATTR_RESULT_LENGTH = 'resultLength'
ATTR_LABEL = 'Problem'
ATTR_LABEL_ALIASES = ('Issue',)
ATTR_RESULTS = 'results'

# Logging
LOG_FORMAT = "%(message)s"
LOG_DATE_FORMAT = "[%X]"
DEFAULT_LOG_LEVEL = os.getenv("COACH_LOG_LEVEL", "INFO").upper()
DEBUG_ENABLED = bool(os.getenv("COACH_DEBUG"))

# File Paths
DATA_DIR = Path(__file__).resolve().parent / 'data'

# Intents shared by every skill
NEXT_INTENT = 'GetNextEventIntent'
HELP_INTENT = 'AMAZON.HelpIntent'
STOP_INTENT = 'AMAZON.StopIntent'
CANCEL_INTENT = 'AMAZON.CancelIntent'

# CLI phrases that map onto the shared intents
FOLLOW_UP_PHRASES = {'more', 'more information', 'next'}
HELP_PHRASES = {'help', '?'}
STOP_PHRASES = {'stop', 'cancel', 'exit', 'quit'}


@dataclass(frozen=True)
class SkillProfile:
    """Per-skill vocabulary. Word choice only, the lookup logic is shared."""
    name: str
    title: str
    kb_file: str
    lookup_intent: str
    slot_name: str
    noun: str
    launch_speech: str
    launch_reprompt: str
    missing_slot_reprompt: str
    card_title_prefix: str
    not_found_speech: str
    recommendation_intro: str
    more_available_speech: str
    follow_up_card_prefix: str
    help_speech: str

    @property
    def kb_path(self):
        return DATA_DIR / self.kb_file


WASTE_LESS_FOOD = SkillProfile(
    name='waste-less-food',
    title='Waste Less Food',
    kb_file='waste_less_food.json',
    lookup_intent='GetWLFRecommendation',
    slot_name='Issue',
    noun='issue',
    launch_speech=(
        'Hi, I am the Waste Less Food coach. With one point three billion tons of food wasted each year, '
        'the annual cost of worldwide food waste has now reached one trillion dollars! '
        'With over ninety percent of food wasted in the United States ending up in landfills, '
        'food waste has become one of the biggest contributors to greenhouse gases. '
        'Are you concerned about the environment? If so, how about doing your part to reduce food waste? '
        'You can ask me to recommend ways to reduce your own food waste when dealing with specific issues. '
        'For example, you can say how closely should I follow expiration dates, or what are some ideas '
        'to reduce food waste, or how do I know if food is spoiled, or what are some ideas to use up food?'
    ),
    launch_reprompt=(
        'For example, you can say how closely should I follow expiration dates, or what are some ideas '
        'to reduce food waste, or how do I know if food is spoiled, or what are some ideas to use up food?'
    ),
    missing_slot_reprompt=(
        'For example, you can say, how closely should we follow expiration dates, or what are some ideas '
        'to reduce food waste, or how do I know if food is spoiled, or what are some ideas to use up food?'
    ),
    card_title_prefix='Waste Less Food recommendation for',
    not_found_speech='Could not find any Waste Less Food recommendation for {label}. ',
    recommendation_intro='Here is a recommendation for dealing with this issue. ',
    more_available_speech='There are more recommendations that might help you reduce food waste. ',
    follow_up_card_prefix='The Waste Less Food coach more information for',
    help_speech=(
        "If you're concerned about the environment, you can ask the Waste Less Food coach to recommend "
        'ways you can reduce food waste, one of the biggest contributors to greenhouse gases. '
        'For a given issue, the Waste Less Food coach provides you with a recommendation to help you. '
        'For example, you can say how closely should I follow expiration dates, or what are some ideas '
        'to reduce food waste, or how do I know if food is spoiled, or what are some ideas to use up food? '
        "If the skill hasn't been opened yet, you can also say in one shot, Alexa, ask Waste Less Food "
        'how closely should I follow expiration dates, or Alexa, ask Waste Less Food how do I know if food '
        'is spoiled? What issue would you like help dealing with?'
    ),
)

WORK_FROM_HOME = SkillProfile(
    name='work-from-home',
    title='My Work-from-Home Coach',
    kb_file='work_from_home.json',
    lookup_intent='GetWFHStrategy',
    slot_name='Problem',
    noun='problem',
    launch_speech=(
        'Hi, I am your Work-from-Home Coach. I will offer you time-tested strategies to help you '
        'successfully work from home. You can ask me how to deal with a particular problem you are facing. '
        'For example, you can say how can I deal with finishing tasks.'
    ),
    launch_reprompt='For example, you can say how can I deal with interruptions or how can I deal with finishing tasks?',
    missing_slot_reprompt='For example, you can say, how can I deal with interruptions. ',
    card_title_prefix='Work-from-Home Strategy recommendation for',
    not_found_speech='Could not find any Work-from-Home Strategy for {label}. ',
    recommendation_intro='A strategy for dealing with your problem is ',
    more_available_speech='There are more strategies that might help. ',
    follow_up_card_prefix='My Work-from-Home Coach more information for',
    help_speech=(
        'You can ask My Work-from-Home Coach about dealing with different problems you face when you work '
        'from home. For a given problem, My Work-from-Home Coach provides you with a strategy to help you. '
        'For example, you can say how can I deal with feeling part of the team. '
        "If the skill hasn't been opened yet, you can also say in one shot, Alexa, ask home office coach "
        'how can I deal with feeling part of the team. What problem would you like help dealing with?'
    ),
)

SKILL_PROFILES = {
    WASTE_LESS_FOOD.name: WASTE_LESS_FOOD,
    WORK_FROM_HOME.name: WORK_FROM_HOME,
}
DEFAULT_SKILL = WASTE_LESS_FOOD.name
