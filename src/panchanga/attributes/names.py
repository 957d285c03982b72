from __future__ import annotations
from typing import Dict, Tuple

WEEKDAYS: Tuple[str, ...] = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)

NAKSHATRAS: Tuple[str, ...] = (
    "Ashwini", "Bharani", "Kruthika", "Rohini", "Mrugasira", "Aarudra",
    "Punarwasu", "Pushyami", "Aslesha", "Makha", "Pubha", "Uttara",
    "Hasta", "Chitta", "Swati", "Visakha", "Anuradha", "Jyesta",
    "Mula", "Purva-Shada", "Uttara-Shaada", "Sravanam", "Dhanista", "Satabhisham",
    "Purva-Bhadra", "Uttara-Bhadra", "Revathi",
)

# Bright half (0..14) then dark half (15..29).
TITHIS: Tuple[str, ...] = (
    "Padyami", "Vidhiya", "Thadiya", "Chavithi", "Panchami", "Shasti",
    "Sapthami", "Ashtami", "Navami", "Dasami", "Ekadasi", "Dvadasi",
    "Trayodasi", "Chaturdasi", "Punnami",
    "Padyami", "Vidhiya", "Thadiya", "Chaviti", "Panchami", "Shasti",
    "Sapthami", "Ashtami", "Navami", "Dasami", "Ekadasi", "Dvadasi",
    "Trayodasi", "Chaturdasi", "Amavasya",
)

# Seven movable karanas followed by the four fixed ones.
KARANAS: Tuple[str, ...] = (
    "Bawa", "Balava", "Kaulava", "Taitula", "Garaja", "Vanija", "Vishti",
    "Sakuna", "Chatushpada", "Nagava", "Kimstughana",
)

YOGAS: Tuple[str, ...] = (
    "Vishkambha", "Prithi", "Ayushman", "Saubhagya", "Sobhana", "Atiganda",
    "Sukarman", "Dhrithi", "Soola", "Ganda", "Vridhi", "Dhruva",
    "Vyaghata", "Harshana", "Vajra", "Siddhi", "Vyatipata", "Variyan",
    "Parigha", "Siva", "Siddha", "Sadhya", "Subha", "Sukla",
    "Bramha", "Indra", "Vaidhruthi",
)

ZODIAC_SIGNS: Tuple[str, ...] = (
    "Mesha", "Vrushabha", "Mithuna", "Karkataka", "Simha", "Kanya",
    "Tula", "Vrushchika", "Dhanu", "Makara", "Kumbha", "Meena",
)

_TABLES: Dict[str, Tuple[str, ...]] = {
    "weekday": WEEKDAYS,
    "nakshatra": NAKSHATRAS,
    "tithi": TITHIS,
    "karana": KARANAS,
    "yoga": YOGAS,
    "raasi": ZODIAC_SIGNS,
}


def table(kind: str) -> Tuple[str, ...]:
    if kind not in _TABLES:
        raise KeyError(f"Unknown name table '{kind}'. Available: {sorted(_TABLES)}")
    return _TABLES[kind]


def name_of(kind: str, index: int) -> str:
    """Name at ``index`` (taken modulo the table length)."""
    names = table(kind)
    return names[index % len(names)]
