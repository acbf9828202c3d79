"""
Curated verb lists for the verb catalog.

Each row is ``(lemma, categories, overrides)``. Rows without overrides are
fully rule-derived. Stress-initial verbs ending in consonant-vowel-consonant
("whisper", "murmur") carry overrides so the doubling rule does not fire.
"""

from costumeswitch.language.verbs import EditionFlags, VerbCategories

_BOTH = EditionFlags(default=True, extended=True)
_EXTENDED = EditionFlags(default=False, extended=True)

ATTRIBUTION_DEFAULT = VerbCategories(attribution=_BOTH)
ATTRIBUTION_EXTENDED_ONLY = VerbCategories(attribution=_EXTENDED)
ACTION_DEFAULT = VerbCategories(action=_BOTH)
ACTION_EXTENDED_ONLY = VerbCategories(action=_EXTENDED)
ATTRIBUTION_AND_ACTION_DEFAULT = VerbCategories(attribution=_BOTH, action=_BOTH)


def _undoubled(lemma: str) -> dict[str, str]:
    return {
        "past": f"{lemma}ed",
        "past_participle": f"{lemma}ed",
        "present_participle": f"{lemma}ing",
    }


def _irregular(past: str, participle: str = "") -> dict[str, str]:
    return {"past": past, "past_participle": participle or past}


ATTRIBUTION_VERBS = [
    ("say", ATTRIBUTION_DEFAULT, _irregular("said")),
    ("tell", ATTRIBUTION_DEFAULT, _irregular("told")),
    ("speak", ATTRIBUTION_DEFAULT, _irregular("spoke", "spoken")),
    ("ask", ATTRIBUTION_DEFAULT, None),
    ("reply", ATTRIBUTION_DEFAULT, None),
    ("answer", ATTRIBUTION_DEFAULT, _undoubled("answer")),
    ("respond", ATTRIBUTION_DEFAULT, None),
    ("whisper", ATTRIBUTION_DEFAULT, _undoubled("whisper")),
    ("murmur", ATTRIBUTION_DEFAULT, _undoubled("murmur")),
    ("mutter", ATTRIBUTION_DEFAULT, _undoubled("mutter")),
    ("shout", ATTRIBUTION_DEFAULT, None),
    ("yell", ATTRIBUTION_DEFAULT, None),
    ("scream", ATTRIBUTION_DEFAULT, None),
    ("cry", ATTRIBUTION_DEFAULT, None),
    ("call", ATTRIBUTION_DEFAULT, None),
    ("exclaim", ATTRIBUTION_DEFAULT, None),
    ("demand", ATTRIBUTION_DEFAULT, None),
    ("plead", ATTRIBUTION_DEFAULT, None),
    ("beg", ATTRIBUTION_DEFAULT, None),
    ("suggest", ATTRIBUTION_DEFAULT, None),
    ("agree", ATTRIBUTION_DEFAULT, None),
    ("add", ATTRIBUTION_DEFAULT, None),
    ("continue", ATTRIBUTION_DEFAULT, None),
    ("explain", ATTRIBUTION_DEFAULT, None),
    ("insist", ATTRIBUTION_DEFAULT, None),
    ("admit", ATTRIBUTION_DEFAULT, None),
    ("announce", ATTRIBUTION_DEFAULT, None),
    ("declare", ATTRIBUTION_DEFAULT, None),
    ("state", ATTRIBUTION_DEFAULT, None),
    ("mention", ATTRIBUTION_DEFAULT, None),
    ("note", ATTRIBUTION_DEFAULT, None),
    ("observe", ATTRIBUTION_DEFAULT, None),
    ("remark", ATTRIBUTION_DEFAULT, None),
    ("comment", ATTRIBUTION_DEFAULT, None),
    ("snap", ATTRIBUTION_DEFAULT, None),
    ("hiss", ATTRIBUTION_DEFAULT, None),
    ("growl", ATTRIBUTION_DEFAULT, None),
    ("bark", ATTRIBUTION_DEFAULT, None),
    ("retort", ATTRIBUTION_DEFAULT, None),
    ("breathe", ATTRIBUTION_DEFAULT, None),
    ("stammer", ATTRIBUTION_DEFAULT, _undoubled("stammer")),
    ("sob", ATTRIBUTION_DEFAULT, None),
    ("groan", ATTRIBUTION_AND_ACTION_DEFAULT, None),
    ("sigh", ATTRIBUTION_AND_ACTION_DEFAULT, None),
    ("laugh", ATTRIBUTION_AND_ACTION_DEFAULT, None),
    ("chuckle", ATTRIBUTION_AND_ACTION_DEFAULT, None),
    ("giggle", ATTRIBUTION_AND_ACTION_DEFAULT, None),
    # extended
    ("interject", ATTRIBUTION_EXTENDED_ONLY, None),
    ("interrupt", ATTRIBUTION_EXTENDED_ONLY, None),
    ("muse", ATTRIBUTION_EXTENDED_ONLY, None),
    ("ponder", ATTRIBUTION_EXTENDED_ONLY, _undoubled("ponder")),
    ("protest", ATTRIBUTION_EXTENDED_ONLY, None),
    ("concede", ATTRIBUTION_EXTENDED_ONLY, None),
    ("acknowledge", ATTRIBUTION_EXTENDED_ONLY, None),
    ("stutter", ATTRIBUTION_EXTENDED_ONLY, _undoubled("stutter")),
    ("whimper", ATTRIBUTION_EXTENDED_ONLY, _undoubled("whimper")),
    ("wail", ATTRIBUTION_EXTENDED_ONLY, None),
    ("roar", ATTRIBUTION_EXTENDED_ONLY, None),
    ("sneer", ATTRIBUTION_EXTENDED_ONLY, None),
    ("scoff", ATTRIBUTION_EXTENDED_ONLY, None),
    ("drawl", ATTRIBUTION_EXTENDED_ONLY, None),
    ("quip", ATTRIBUTION_EXTENDED_ONLY, {
        "past": "quipped", "past_participle": "quipped", "present_participle": "quipping",
    }),
    ("grumble", ATTRIBUTION_EXTENDED_ONLY, None),
    ("grunt", ATTRIBUTION_EXTENDED_ONLY, None),
    ("purr", ATTRIBUTION_EXTENDED_ONLY, None),
    ("rasp", ATTRIBUTION_EXTENDED_ONLY, None),
    ("croak", ATTRIBUTION_EXTENDED_ONLY, None),
    ("squeak", ATTRIBUTION_EXTENDED_ONLY, None),
    ("snarl", ATTRIBUTION_EXTENDED_ONLY, None),
    ("blurt", ATTRIBUTION_EXTENDED_ONLY, None),
    ("lament", ATTRIBUTION_EXTENDED_ONLY, None),
    ("inquire", ATTRIBUTION_EXTENDED_ONLY, None),
    ("query", ATTRIBUTION_EXTENDED_ONLY, None),
    ("tease", ATTRIBUTION_EXTENDED_ONLY, None),
    ("taunt", ATTRIBUTION_EXTENDED_ONLY, None),
    ("mock", ATTRIBUTION_EXTENDED_ONLY, None),
    ("chirp", ATTRIBUTION_EXTENDED_ONLY, None),
    ("counter", ATTRIBUTION_EXTENDED_ONLY, _undoubled("counter")),
    ("confirm", ATTRIBUTION_EXTENDED_ONLY, None),
    ("conclude", ATTRIBUTION_EXTENDED_ONLY, None),
    ("warn", ATTRIBUTION_EXTENDED_ONLY, None),
    ("urge", ATTRIBUTION_EXTENDED_ONLY, None),
    ("prompt", ATTRIBUTION_EXTENDED_ONLY, None),
    ("repeat", ATTRIBUTION_EXTENDED_ONLY, None),
    ("sing", ATTRIBUTION_EXTENDED_ONLY, _irregular("sang", "sung")),
    ("begin", ATTRIBUTION_EXTENDED_ONLY, _irregular("began", "begun")),
]

ACTION_VERBS = [
    ("nod", ACTION_DEFAULT, None),
    ("smile", ACTION_DEFAULT, None),
    ("grin", ACTION_DEFAULT, None),
    ("frown", ACTION_DEFAULT, None),
    ("shrug", ACTION_DEFAULT, None),
    ("glance", ACTION_DEFAULT, None),
    ("look", ACTION_DEFAULT, None),
    ("turn", ACTION_DEFAULT, None),
    ("lean", ACTION_DEFAULT, None),
    ("step", ACTION_DEFAULT, None),
    ("walk", ACTION_DEFAULT, None),
    ("run", ACTION_DEFAULT, _irregular("ran", "run")),
    ("sit", ACTION_DEFAULT, _irregular("sat")),
    ("stand", ACTION_DEFAULT, _irregular("stood")),
    ("wave", ACTION_DEFAULT, None),
    ("point", ACTION_DEFAULT, None),
    ("blink", ACTION_DEFAULT, None),
    ("stare", ACTION_DEFAULT, None),
    ("gasp", ACTION_DEFAULT, None),
    ("pause", ACTION_DEFAULT, None),
    ("hesitate", ACTION_DEFAULT, None),
    ("reach", ACTION_DEFAULT, None),
    ("grab", ACTION_DEFAULT, None),
    ("pull", ACTION_DEFAULT, None),
    ("push", ACTION_DEFAULT, None),
    ("rise", ACTION_DEFAULT, _irregular("rose", "risen")),
    ("kneel", ACTION_DEFAULT, _irregular("knelt")),
    ("tilt", ACTION_DEFAULT, None),
    ("wince", ACTION_DEFAULT, None),
    ("blush", ACTION_DEFAULT, None),
    ("clap", ACTION_DEFAULT, None),
    ("cross", ACTION_DEFAULT, None),
    ("raise", ACTION_DEFAULT, None),
    ("watch", ACTION_DEFAULT, None),
    ("move", ACTION_DEFAULT, None),
    ("freeze", ACTION_DEFAULT, _irregular("froze", "frozen")),
    ("jump", ACTION_DEFAULT, None),
    ("hug", ACTION_DEFAULT, None),
    ("scowl", ACTION_DEFAULT, None),
    ("smirk", ACTION_DEFAULT, None),
    ("pout", ACTION_DEFAULT, None),
    ("tremble", ACTION_DEFAULT, None),
    ("squint", ACTION_DEFAULT, None),
    # extended
    ("flinch", ACTION_EXTENDED_ONLY, None),
    ("bristle", ACTION_EXTENDED_ONLY, None),
    ("stumble", ACTION_EXTENDED_ONLY, None),
    ("pace", ACTION_EXTENDED_ONLY, None),
    ("lunge", ACTION_EXTENDED_ONLY, None),
    ("crouch", ACTION_EXTENDED_ONLY, None),
    ("bow", ACTION_EXTENDED_ONLY, None),
    ("curtsy", ACTION_EXTENDED_ONLY, None),
    ("salute", ACTION_EXTENDED_ONLY, None),
    ("cringe", ACTION_EXTENDED_ONLY, None),
    ("grimace", ACTION_EXTENDED_ONLY, None),
    ("beam", ACTION_EXTENDED_ONLY, None),
    ("slump", ACTION_EXTENDED_ONLY, None),
    ("sag", ACTION_EXTENDED_ONLY, None),
    ("shiver", ACTION_EXTENDED_ONLY, _undoubled("shiver")),
    ("shudder", ACTION_EXTENDED_ONLY, _undoubled("shudder")),
    ("sprint", ACTION_EXTENDED_ONLY, None),
    ("dash", ACTION_EXTENDED_ONLY, None),
    ("stride", ACTION_EXTENDED_ONLY, _irregular("strode", "stridden")),
    ("swing", ACTION_EXTENDED_ONLY, _irregular("swung")),
    ("throw", ACTION_EXTENDED_ONLY, _irregular("threw", "thrown")),
    ("catch", ACTION_EXTENDED_ONLY, _irregular("caught")),
    ("hold", ACTION_EXTENDED_ONLY, _irregular("held")),
    ("drop", ACTION_EXTENDED_ONLY, None),
    ("slam", ACTION_EXTENDED_ONLY, None),
    ("grip", ACTION_EXTENDED_ONLY, None),
    ("clutch", ACTION_EXTENDED_ONLY, None),
    ("yawn", ACTION_EXTENDED_ONLY, None),
    ("stretch", ACTION_EXTENDED_ONLY, None),
    ("peer", ACTION_EXTENDED_ONLY, None),
    ("peek", ACTION_EXTENDED_ONLY, None),
    ("gaze", ACTION_EXTENDED_ONLY, None),
    ("glare", ACTION_EXTENDED_ONLY, None),
    ("sneak", ACTION_EXTENDED_ONLY, None),
    ("tiptoe", ACTION_EXTENDED_ONLY, None),
    ("storm", ACTION_EXTENDED_ONLY, None),
    ("march", ACTION_EXTENDED_ONLY, None),
    ("spin", ACTION_EXTENDED_ONLY, _irregular("spun")),
    ("wipe", ACTION_EXTENDED_ONLY, None),
    ("rub", ACTION_EXTENDED_ONLY, None),
    ("tap", ACTION_EXTENDED_ONLY, None),
    ("knock", ACTION_EXTENDED_ONLY, None),
]

# (lemma, particle, categories, overrides)
PHRASAL_VERBS = [
    ("perk", "up", ACTION_DEFAULT, None),
    ("lash", "out", ACTION_EXTENDED_ONLY, None),
    ("drift", "off", ACTION_EXTENDED_ONLY, None),
    ("double", "down", ACTION_EXTENDED_ONLY, None),
    ("fall", "apart", ACTION_EXTENDED_ONLY, _irregular("fell", "fallen")),
    ("lie", "down", ACTION_EXTENDED_ONLY, _irregular("lay", "lain")),
    ("sit", "up", ACTION_EXTENDED_ONLY, _irregular("sat")),
    ("trail", "off", ATTRIBUTION_EXTENDED_ONLY, None),
    ("point", "out", ATTRIBUTION_EXTENDED_ONLY, None),
    ("chime", "in", ATTRIBUTION_EXTENDED_ONLY, None),
    ("cut", "in", ATTRIBUTION_EXTENDED_ONLY, _irregular("cut")),
    ("speak", "up", ATTRIBUTION_EXTENDED_ONLY, _irregular("spoke", "spoken")),
]

IRREGULAR_VERBS = [
    ("arise", ACTION_EXTENDED_ONLY, _irregular("arose", "arisen")),
    ("befall", ACTION_EXTENDED_ONLY, _irregular("befell", "befallen")),
    ("overcome", ACTION_EXTENDED_ONLY, _irregular("overcame", "overcome")),
    ("withstand", ACTION_EXTENDED_ONLY, _irregular("withstood")),
]

# Entries listed form-by-form rather than derived
MANUAL_VERBS = [
    ("flee", ACTION_EXTENDED_ONLY, {
        "base": "flee",
        "third_person": "flees",
        "past": "fled",
        "past_participle": "fled",
        "present_participle": "fleeing",
    }),
    ("shake", ACTION_EXTENDED_ONLY, {
        "base": "shake",
        "third_person": "shakes",
        "past": "shook",
        "past_participle": "shaken",
        "present_participle": "shaking",
    }),
]
