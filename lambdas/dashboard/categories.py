"""Fuzzy classification of part names into F1 component categories."""

OTHER = "Other"
MIN_WORD_LENGTH = 3
SIMILARITY_THRESHOLD = 0.7

# Checked in order; the first keyword contained in the name wins.
PART_CATEGORIES = {
    "Power Unit": ["ice", "internal combustion engine", "mgu-k", "mgu-h", "turbo", "turbocharger",
                   "energy store", "battery", "control electronics", "ers"],
    "Gearbox": ["gearbox", "transmission", "casing", "differential", "actuator", "gear", "sequential",
                "hydraulic", "oil cooler"],
    "Front Wing": ["front wing", "nose", "nose cone", "front endplate", "front flap", "cascade",
                   "front mainplane", "cape"],
    "Rear Wing": ["rear wing", "drs", "beam wing", "rear endplate", "gurney flap", "rear mainplane",
                  "monkey seat"],
    "Floor": ["floor", "diffuser", "plank", "skid block", "edge wing", "tunnel", "venturi"],
    "Sidepod": ["sidepod", "radiator", "cooling", "bargeboard", "inlet", "airbox"],
    "Monocoque": ["monocoque", "chassis", "survival cell", "cockpit", "halo", "headrest"],
    "Suspension": ["suspension", "wishbone", "pushrod", "pullrod", "damper", "spring", "anti-roll bar",
                   "heave element"],
    "Brakes": ["brake", "disc", "caliper", "duct", "brake by wire", "bbw", "master cylinder"],
    "Wheels": ["wheel", "rim", "wheel nut", "hub", "upright"],
    "Steering": ["steering", "rack", "column", "steering wheel"],
    "Exhaust": ["exhaust", "wastegate", "blowdown"],
    "Fuel System": ["fuel", "tank", "fuel cell", "pump"],
    "Electronics": ["sensor", "ecu", "wiring", "harness", "telemetry", "antenna"],
}


def levenshtein(a, b):
    """Case-insensitive edit distance."""
    a, b = a.lower(), b.lower()
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    previous = list(range(len(a) + 1))
    for i, b_char in enumerate(b, start=1):
        current = [i]
        for j, a_char in enumerate(a, start=1):
            if a_char == b_char:
                current.append(previous[j - 1])
            else:
                current.append(min(previous[j - 1], current[j - 1], previous[j]) + 1)
        previous = current
    return previous[-1]


def classify_part(name):
    """Return the category for a part name, or "Other".

    A keyword contained in the name is an immediate match. Otherwise each word
    of three or more letters is compared to every keyword and the closest one
    above the similarity threshold wins.
    """
    lowered = name.lower()
    words = lowered.split()
    best_category = OTHER
    best_distance = None

    for category, keywords in PART_CATEGORIES.items():
        for keyword in keywords:
            if keyword in lowered:
                return category

            for word in words:
                if len(word) < MIN_WORD_LENGTH:
                    continue
                distance = levenshtein(word, keyword)
                similarity = 1 - distance / max(len(word), len(keyword))
                if similarity > SIMILARITY_THRESHOLD and (best_distance is None or distance < best_distance):
                    best_distance = distance
                    best_category = category

    return best_category
