"""
Static scoring configuration for the packing-list engine.

Every table here is keyed by an item's English category name and is versioned
together with ``data/items.json``. The mappings are wrapped in
``MappingProxyType`` and the id sets are frozensets so nothing at request
time can alter them.
"""
from __future__ import annotations

from types import MappingProxyType

DEFAULT_PRIORITY = 30
DEFAULT_THRESHOLD = 25
DEFAULT_CAP = 6

# ---------------------------------------------------------------------------
# Weather normalisation
# ---------------------------------------------------------------------------

WEATHER_CONDITION_MAP = MappingProxyType({
    "thunderstorm": "rainy",
    "drizzle": "rainy",
    "rain": "rainy",
    "snow": "snowy",
    "clear": "sunny",
    "clouds": "clouds",
    # Atmosphere group
    "mist": "special",
    "smoke": "special",
    "haze": "special",
    "dust": "special",
    "fog": "special",
    "sand": "special",
    "ash": "special",
    "squall": "special",
    "tornado": "special",
})

# ---------------------------------------------------------------------------
# Per-category tables
# ---------------------------------------------------------------------------

CATEGORY_PRIORITY = MappingProxyType({
    "Essentials": 100,
    "Electronics": 80,
    "Clothing/Accessories": 75,
    "Personal Care": 70,
    "Medical Kit": 65,
    "Business": 60,
    "Beach": 55,
    "Skiing Gear": 55,
    "Camping Gear": 55,
    "Cosmetics": 40,
    "Comfort": 35,
    "Food & Snacks": 30,
    "Miscellaneous": 25,
})

SCORE_THRESHOLDS = MappingProxyType({
    "Essentials": 40,
    "Clothing/Accessories": 35,
    "Business": 35,
    "Electronics": 30,
    "Personal Care": 30,
    "Cosmetics": 30,
    "Medical Kit": 30,
    "Beach": 30,
    "Skiing Gear": 30,
    "Camping Gear": 30,
    "Comfort": 20,
    "Food & Snacks": 20,
    "Miscellaneous": 20,
})

# Selected activity -> {category: threshold delta}. Deltas of every selected
# activity are summed before the floor is applied.
ACTIVITY_THRESHOLD_ADJUSTMENTS = MappingProxyType({
    "activity_camping": MappingProxyType({
        "Clothing/Accessories": -10,
        "Medical Kit": -10,
        "Camping Gear": -10,
        "Food & Snacks": -5,
    }),
    "activity_hiking": MappingProxyType({
        "Clothing/Accessories": -5,
        "Medical Kit": -10,
        "Camping Gear": -5,
        "Food & Snacks": -5,
    }),
    "activity_business": MappingProxyType({
        "Business": -15,
        "Cosmetics": -5,
    }),
    "activity_beach": MappingProxyType({
        "Beach": -10,
        "Personal Care": -5,
    }),
    "activity_skiing": MappingProxyType({
        "Skiing Gear": -10,
        "Clothing/Accessories": -5,
    }),
    "activity_party": MappingProxyType({
        "Cosmetics": -10,
    }),
    "activity_photography": MappingProxyType({
        "Electronics": -5,
    }),
})

MAX_ITEMS_PER_CATEGORY = MappingProxyType({
    "Essentials": 13,
    "Electronics": 8,
    "Clothing/Accessories": 14,
    "Personal Care": 8,
    "Cosmetics": 5,
    "Medical Kit": 6,
    "Beach": 5,
    "Skiing Gear": 8,
    "Camping Gear": 8,
    "Business": 4,
    "Comfort": 4,
    "Food & Snacks": 3,
    "Miscellaneous": 5,
})

# category -> (minimum trip length exceeded, bonus points)
DURATION_BONUSES = MappingProxyType({
    "Comfort": (7, 5.0),
    "Medical Kit": (5, 3.0),
})

# ---------------------------------------------------------------------------
# Item sets
# ---------------------------------------------------------------------------

ESSENTIAL_ITEMS = frozenset({
    "passport",
    "id_card_cn",
    "id_card_us",
    "drivers_license",
    "student_id",
    "credit_card",
    "cash",
    "phone",
    "phone_charger",
    "toothbrush_paste",
    "underwear",
    "socks",
})

INTERNATIONAL_ESSENTIAL_ITEMS = frozenset({
    "passport",
    "visa_info",
    "credit_card",
    "travel_adapter",
})

CRITICAL_DOCUMENTS = frozenset({
    "passport",
    "id_card_cn",
    "id_card_us",
    "drivers_license",
    "student_id",
    "credit_card",
})

PASSPORT = "passport"

# Origin country -> its domestic ID card item
ID_CARD_BY_COUNTRY = MappingProxyType({
    "CN": "id_card_cn",
    "US": "id_card_us",
})

ALL_ID_CARDS = frozenset(ID_CARD_BY_COUNTRY.values())

# ---------------------------------------------------------------------------
# Sub-category ordering
# ---------------------------------------------------------------------------
# English category -> ordered (bucket name, item ids) pairs. Items listed in
# no bucket keep their ranked order after the last bucket.

SUBCATEGORY_ORDER = MappingProxyType({
    "Essentials": (
        ("identity", ("passport", "id_card_cn", "id_card_us", "drivers_license", "student_id")),
        ("travel_info", ("visa_info", "international_driving_permit_info")),
        ("payment", ("credit_card", "cash")),
        ("bookings", ("flight_reservation", "hotel_reservation")),
        ("other", ("keys", "emergency_contacts")),
    ),
    "Electronics": (
        ("devices", ("phone", "ipad", "laptop", "camera", "smartwatch", "headphones", "e_reader", "walkie_talkie")),
        ("power", ("power_bank", "phone_charger", "laptop_charger", "camera_charger", "ipad_charger", "travel_adapter")),
    ),
    "Clothing/Accessories": (
        ("tops", ("t_shirt", "long_sleeve_shirt", "sweater", "thermal_underwear", "pajamas", "swimsuit", "business_suit")),
        ("outerwear", ("rain_poncho", "light_jacket", "heavy_jacket", "hardshell_jacket", "down_jacket")),
        ("bottoms", ("jeans", "shorts", "casual_pants", "quick_dry_pants")),
        ("shoes", ("sneakers", "sandals", "hiking_boots", "dress_shoes")),
        ("underwear", ("underwear", "socks", "hiking_socks")),
        ("accessories", ("scarf", "gloves", "winter_hat", "sunglasses", "hat_cap", "tie", "belt", "jewelry")),
    ),
    "Personal Care": (
        ("cleansing", ("toothbrush_paste", "face_wash", "shampoo", "deodorant")),
        ("grooming", ("razor", "nail_clippers")),
        ("skincare", ("moisturizer", "sunscreen", "lip_balm", "hand_cream")),
        ("hygiene", ("sanitary_pads",)),
    ),
    "Cosmetics": (
        ("base", ("foundation", "concealer")),
        ("eyes", ("eyeshadow", "mascara")),
        ("lips", ("lipstick",)),
        ("tools", ("makeup_brushes",)),
    ),
    "Medical Kit": (
        ("first_aid", ("band_aids", "alcohol_wipes", "first_aid_kit", "thermometer")),
        ("medicines", ("pain_relievers", "personal_medications", "motion_sickness_pills")),
        ("protection", ("insect_repellent",)),
    ),
    "Beach": (
        ("basics", ("beach_towel", "beach_umbrella", "beach_bag")),
        ("water", ("water_shoes", "snorkel_mask")),
    ),
    "Skiing Gear": (
        ("core", ("ski_jacket", "ski_pants", "ski_boots", "ski_helmet", "ski_goggles")),
        ("accessories", ("ski_gloves", "ski_socks", "hand_warmers")),
    ),
    "Camping Gear": (
        ("shelter", ("tent", "sleeping_bag", "sleeping_pad")),
        ("cooking", ("camping_stove", "camping_lantern")),
        ("trail", ("hiking_backpack", "hiking_poles", "water_bottle")),
    ),
    "Business": (
        ("documents", ("business_cards", "document_folder")),
        ("office", ("notebook_pen", "presentation_clicker")),
    ),
    "Comfort": (
        ("sleep", ("travel_pillow", "eye_mask", "earplugs", "travel_blanket")),
        ("indoor", ("slippers",)),
        ("warmth", ("heating_pad",)),
    ),
    "Food & Snacks": (
        ("snacks", ("travel_snacks", "energy_bars", "nuts")),
        ("drinks", ("instant_coffee",)),
    ),
    "Miscellaneous": (
        ("basics", ("towel", "umbrella")),
        ("packing", ("laundry_bags", "zip_lock_bags", "shopping_bag")),
        ("stationery", ("notepad",)),
        ("entertainment", ("books", "cards")),
        ("gifts", ("gifts",)),
    ),
})
