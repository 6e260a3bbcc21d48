"""Reference data for entity name normalization.

Maps multilingual surface forms of frequently extracted political actors,
countries and institutions to one canonical lowercase English name. Keys are
lowercase and trimmed because lookups happen after the same cleanup.

The table is exposed read-only; callers that need a different table (tests,
regional deployments) pass their own mapping to
:class:`leadernet.normalization.aliases.AliasResolver`.
"""

from types import MappingProxyType

_PEOPLE = {
    # Vladimir Putin
    "владимир путин": "vladimir putin",
    "владимир владимирович путин": "vladimir putin",
    "путин": "vladimir putin",
    "володимир путін": "vladimir putin",
    "путін": "vladimir putin",
    "βλαντιμίρ πούτιν": "vladimir putin",
    "πούτιν": "vladimir putin",
    "블라디미르 푸틴": "vladimir putin",
    "푸틴": "vladimir putin",
    "普京": "vladimir putin",
    "弗拉基米尔·普京": "vladimir putin",
    "プーチン": "vladimir putin",
    "فلاديمير بوتين": "vladimir putin",
    "بوتين": "vladimir putin",
    "व्लादिमीर पुतिन": "vladimir putin",
    "पुतिन": "vladimir putin",
    "ভ্লাদিমির পুতিন": "vladimir putin",
    "পুতিন": "vladimir putin",
    # Donald Trump
    "дональд трамп": "donald trump",
    "трамп": "donald trump",
    "трaмп": "donald trump",
    "ντόναλντ τραμπ": "donald trump",
    "τραμπ": "donald trump",
    "도널드 트럼프": "donald trump",
    "트럼프": "donald trump",
    "唐纳德·特朗普": "donald trump",
    "特朗普": "donald trump",
    "川普": "donald trump",
    "トランプ": "donald trump",
    "دونالد ترامب": "donald trump",
    "ترامب": "donald trump",
    "डोनाल्ड ट्रंप": "donald trump",
    "ट्रंप": "donald trump",
    "ডোনাল্ড ট্রাম্প": "donald trump",
    "ট্রাম্প": "donald trump",
    "tramp": "donald trump",
    "trumps": "donald trump",
    # Trump family and administration, kept apart from the substring rule
    "melania trump": "melania trump",
    "мелания трамп": "melania trump",
    "ivanka trump": "ivanka trump",
    "иванка трамп": "ivanka trump",
    "ἵνα ἀντερῶν": "ivanka trump",
    "donald trump jr": "donald trump jr",
    "donald trump jr.": "donald trump jr",
    "дональд трамп-младший": "donald trump jr",
    "αντΐτρουμπ jr": "donald trump jr",
    "eric trump": "eric trump",
    "trump administration": "trump administration",
    "트럼프 행정부": "trump administration",
    # Joe Biden
    "джо байден": "joe biden",
    "байден": "joe biden",
    "τζο μπάιντεν": "joe biden",
    "μπάιντεν": "joe biden",
    "조 바이든": "joe biden",
    "바이든": "joe biden",
    "乔·拜登": "joe biden",
    "拜登": "joe biden",
    "バイデン": "joe biden",
    "جو بايدن": "joe biden",
    "بايدن": "joe biden",
    "जो बाइडन": "joe biden",
    "बाइडन": "joe biden",
    "জো বাইডেন": "joe biden",
    "বাইডেন": "joe biden",
    "hunter biden": "hunter biden",
    "хантер байден": "hunter biden",
    "jill biden": "jill biden",
    # Volodymyr Zelensky
    "владимир зеленский": "volodymyr zelensky",
    "зеленский": "volodymyr zelensky",
    "володимир зеленський": "volodymyr zelensky",
    "зеленський": "volodymyr zelensky",
    "ζελένσκι": "volodymyr zelensky",
    "젤렌스키": "volodymyr zelensky",
    "泽连斯基": "volodymyr zelensky",
    "ゼレンスキー": "volodymyr zelensky",
    "زيلينسكي": "volodymyr zelensky",
    "ज़ेलेंस्की": "volodymyr zelensky",
    "জেলেনস্কি": "volodymyr zelensky",
    "zelenskiy": "volodymyr zelensky",
    "zelenskyy": "volodymyr zelensky",
    "volodymyr zelenskyy": "volodymyr zelensky",
    # Xi Jinping
    "си цзиньпин": "xi jinping",
    "시진핑": "xi jinping",
    "习近平": "xi jinping",
    "習近平": "xi jinping",
    "σι τζινπίνγκ": "xi jinping",
    "شي جين بينغ": "xi jinping",
    "शी जिनपिंग": "xi jinping",
    "শি জিনপিং": "xi jinping",
    "xi": "xi jinping",
    # Korean peninsula
    "ким чен ын": "kim jong-un",
    "김정은": "kim jong-un",
    "金正恩": "kim jong-un",
    "kim jong un": "kim jong-un",
    "문재인": "moon jae-in",
    "윤석열": "yoon suk-yeol",
    # Other recurring figures
    "ведщим денисенко": "vadym denysenko",
    "вадим денисенко": "vadym denysenko",
    "денисенко": "vadym denysenko",
    "илон маск": "elon musk",
    "일론 머스크": "elon musk",
    "马斯克": "elon musk",
    "musk": "elon musk",
}

_PLACES_AND_INSTITUTIONS = {
    # Countries
    "россия": "russia",
    "росія": "russia",
    "ρωσία": "russia",
    "러시아": "russia",
    "俄罗斯": "russia",
    "روسيا": "russia",
    "रूस": "russia",
    "রাশিয়া": "russia",
    "russian federation": "russia",
    "украина": "ukraine",
    "україна": "ukraine",
    "українa": "ukraine",
    "ουκρανία": "ukraine",
    "우크라이나": "ukraine",
    "乌克兰": "ukraine",
    "أوكرانيا": "ukraine",
    "यूक्रेन": "ukraine",
    "ইউক্রেন": "ukraine",
    "сша": "usa",
    "соединенные штаты": "usa",
    "америка": "usa",
    "ηπα": "usa",
    "미국": "usa",
    "美国": "usa",
    "الولايات المتحدة": "usa",
    "अमेरिका": "usa",
    "যুক্তরাষ্ট্র": "usa",
    "u.s.": "usa",
    "u.s.a.": "usa",
    "united states": "usa",
    "united states of america": "usa",
    "america": "usa",
    "китай": "china",
    "κίνα": "china",
    "중국": "china",
    "中国": "china",
    "الصين": "china",
    "चीन": "china",
    "চীন": "china",
    "prc": "china",
    "people's republic of china": "china",
    "dprk": "north korea",
    "кндр": "north korea",
    "북한": "north korea",
    "朝鲜": "north korea",
    "rok": "south korea",
    "한국": "south korea",
    "roc": "taiwan",
    "台湾": "taiwan",
    # Blocs and alliances
    "европа": "europe",
    "европейский союз": "european union",
    "ес": "european union",
    "євросоюз": "european union",
    "유럽연합": "european union",
    "欧盟": "european union",
    "الاتحاد الأوروبي": "european union",
    "eu": "european union",
    "нато": "nato",
    "νατο": "nato",
    "나토": "nato",
    "北约": "nato",
    "الناتو": "nato",
    "नाटो": "nato",
    # Seats of government
    "белый дом": "white house",
    "백악관": "white house",
    "白宫": "white house",
    "البيت الأبيض": "white house",
    "кремль": "kremlin",
    "크렘린": "kremlin",
    "克里姆林宫": "kremlin",
    "الكرملين": "kremlin",
    "пентагон": "pentagon",
    "μαρ-α-λαγο": "mar-a-lago",
    "ραφ-α-φαβρα": "mar-a-lago",
    "μαρ ο λέην": "mar-a-lago",
    "μαρ α λαγο": "mar-a-lago",
    "американские президенты": "american presidents",
}

# Canonical lowercase name for every known surface form.
ENTITY_NAME_ALIASES = MappingProxyType({**_PEOPLE, **_PLACES_AND_INSTITUTIONS})

__all__ = ["ENTITY_NAME_ALIASES"]
