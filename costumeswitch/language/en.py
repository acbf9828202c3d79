"""
English language profile for CostumeSwitch.

The quote table also covers CJK, guillemet and smart-quote styles since
role-play text routinely mixes them with English prose.
"""

from costumeswitch.language.profile import LanguageProfile, QuotePair, register_profile

ENGLISH = LanguageProfile(
    code="en",
    name="English",

    # --- Quote styles ---
    quote_pairs=(
        QuotePair('"', '"', symmetric=True),
        QuotePair("＂", "＂", symmetric=True),   # fullwidth "
        QuotePair("“", "”"),   # “ ”
        QuotePair("„", "”"),   # „ ”
        QuotePair("‟", "”"),   # ‟ ”
        QuotePair("«", "»"),   # « »
        QuotePair("‹", "›"),   # ‹ ›
        QuotePair("「", "」"),   # 「 」
        QuotePair("『", "』"),   # 『 』
        QuotePair("｢", "｣"),   # ｢ ｣
        QuotePair("《", "》"),   # 《 》
        QuotePair("〈", "〉"),   # 〈 〉
        QuotePair("﹁", "﹂"),   # ﹁ ﹂
        QuotePair("﹃", "﹄"),   # ﹃ ﹄
        QuotePair("〝", "〞"),   # 〝 〞
        QuotePair("‘", "’"),   # ‘ ’
        QuotePair("‚", "’"),   # ‚ ’
        QuotePair("‛", "’"),   # ‛ ’
        QuotePair("'", "'", symmetric=True, apostrophe_sensitive=True),
    ),

    # --- Name-tail grammar ---
    honorifics=(
        # Western
        "Jr", "Sr", "Esq", "II", "III",
        # Japanese / Korean (romanized)
        "san", "sama", "kun", "chan", "senpai", "sensei", "dono", "hime",
        "ssi", "nim",
        # Ideographic
        "さん", "様", "くん", "君", "ちゃん", "先輩", "先生", "殿", "氏",
        "씨", "님",
    ),

    default_pronouns=("he", "she", "they"),
    stripped_name_suffixes=("sama", "san"),
)

register_profile(ENGLISH)
