"""
Canned entry content used whenever live generation is unavailable or unusable.
"""

FALLBACK_SUMMARY = (
    "It sounds like you're carrying a lot right now. The core issue is juggling "
    "expectations and feeling unsure how to prioritise yourself."
)

FALLBACK_FEELINGS = (
    'Overwhelm from competing demands',
    "Guilt for not meeting everyone's expectations",
    'Anxiety about making the wrong call',
)

FALLBACK_ACTION_PLAN = (
    'Name your top three priorities for this week and schedule them first.',
    'Communicate one clear boundary to someone close to reduce pressure.',
    'Break your problem into a next tiny step you can do today (15 minutes).',
    'Plan a short decompression ritual (walk, breathwork, or journaling) daily.',
)

FALLBACK_REFLECTION_PROMPTS = (
    "What do I need most right now, and what's one way to honour it?",
    'Where am I saying yes when I really mean no?',
    'If I were advising a friend, what next step would I suggest?',
)


def fallback_fields() -> dict:
    """Fresh copy of the fallback content, keyed by the upstream JSON names."""
    return {
        'summary': FALLBACK_SUMMARY,
        'feelings': list(FALLBACK_FEELINGS),
        'actionPlan': list(FALLBACK_ACTION_PLAN),
        'reflectionPrompts': list(FALLBACK_REFLECTION_PROMPTS),
    }
