"""Demo inventory fixtures for the Pit Lane Ledger dashboard.

Part records are generated from per-category row tables. Assignment and
predictive status are derived from location, pitlane status and life so the
two datasets share one generator instead of two literal tables.

Only ``lastUpdated`` depends on the wall clock; everything else is fixed.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional


class PitlaneStatus(str, Enum):
    """Where a part is in its trackside lifecycle."""

    TRACKSIDE = "🏁 Trackside"
    IN_TRANSIT_AIR = "✈️ In Transit"
    IN_TRANSIT_ROAD = "🚚 In Transit"
    MANUFACTURED = "🏭 Manufactured"
    DAMAGED = "⚠️ DAMAGED"
    SCRAPPED = "📦 SCRAPPED"
    CLEARED = "✅ Cleared for Race"


class PredictiveStatus(str, Enum):
    HEALTHY = "HEALTHY"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"
    RETIRED = "RETIRED"


WARNING_LIFE_THRESHOLD = 60  # life at or below this is flagged WARNING

DEFAULT_DRIVERS = {"car1": "Alex Albon", "car2": "Carlos Sainz"}

RACE_CALENDAR = [
    {"round": 1, "race": "Bahrain GP", "date": "2025-03-02", "location": "Sakhir", "weather": "Clear, 28°C"},
    {"round": 2, "race": "Saudi Arabian GP", "date": "2025-03-09", "location": "Jeddah", "weather": "Night, 26°C"},
    {"round": 3, "race": "Australian GP", "date": "2025-03-23", "location": "Melbourne", "weather": "Partly Cloudy, 22°C"},
]

DRIVER_ASSIGNMENTS = {
    "car1": {"driver": "Alex Albon", "chassis": "FW46-01", "engine": "Mercedes M15 E"},
    "car2": {"driver": "Carlos Sainz", "chassis": "FW46-02", "engine": "Mercedes M15 E"},
    "reserve": {"driver": "Franco Colapinto"},
}


# ──────────────────────────────────────────────
# Record model
# ──────────────────────────────────────────────
@dataclass
class PartRecord:
    id: str
    key: str
    name: str
    pitlane_status: PitlaneStatus
    location: str
    assignment: str
    life: int
    last_updated: datetime
    life_remaining: int
    predictive_status: PredictiveStatus
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        """Serialize with the camelCase field names the dashboard expects."""
        data = {
            "id": self.id,
            "key": self.key,
            "name": self.name,
            "pitlaneStatus": self.pitlane_status.value,
            "location": self.location,
            "assignment": self.assignment,
            "life": self.life,
            "lastUpdated": self.last_updated.isoformat(),
            "lifeRemaining": self.life_remaining,
            "predictiveStatus": self.predictive_status.value,
        }
        if self.notes:
            data["notes"] = self.notes
        return data


@dataclass
class Category:
    """One block of parts sharing an id prefix.

    Each row is ``(name, status, location, life, life_remaining, days_ago)``
    with an optional trailing incident note.
    """

    prefix: str
    block: int
    rows: list


@dataclass
class Dataset:
    name: str
    categories: list
    key_width: int = 0
    drivers: dict = field(default_factory=lambda: dict(DEFAULT_DRIVERS))

    def format_key(self, category, index):
        number = str(category.block * 100 + index)
        return f"PIT-{number.zfill(self.key_width)}"


def derive_assignment(status, location, drivers):
    if status in (PitlaneStatus.DAMAGED, PitlaneStatus.SCRAPPED):
        return "Unassigned"
    for slot, garage in (("car1", "Garage 1"), ("car2", "Garage 2")):
        if location == garage:
            surname = drivers[slot].split()[-1]
            return f"Car {slot[-1]} ({surname})"
    return "Spares"


def derive_predictive_status(status, life):
    if status == PitlaneStatus.SCRAPPED:
        return PredictiveStatus.RETIRED
    if status == PitlaneStatus.DAMAGED:
        return PredictiveStatus.CRITICAL
    if life <= WARNING_LIFE_THRESHOLD:
        return PredictiveStatus.WARNING
    return PredictiveStatus.HEALTHY


def build_records(dataset, now=None):
    """Expand a dataset's category tables into PartRecords."""
    if now is None:
        now = datetime.now(timezone.utc)

    records = []
    for category in dataset.categories:
        for index, row in enumerate(category.rows, start=1):
            name, status, location, life, life_remaining, days_ago = row[:6]
            notes = row[6] if len(row) > 6 else None
            records.append(PartRecord(
                id=f"{category.prefix}-{index}",
                key=dataset.format_key(category, index),
                name=name,
                pitlane_status=status,
                location=location,
                assignment=derive_assignment(status, location, dataset.drivers),
                life=life,
                last_updated=now - timedelta(days=days_ago),
                life_remaining=life_remaining,
                predictive_status=derive_predictive_status(status, life),
                notes=notes,
            ))
    return records


def generate_parts(dataset, now=None):
    """Return the dataset's part records as JSON-ready dicts."""
    return [record.to_dict() for record in build_records(dataset, now)]


# ──────────────────────────────────────────────
# Datasets
# ──────────────────────────────────────────────
TRACKSIDE = PitlaneStatus.TRACKSIDE
AIR = PitlaneStatus.IN_TRANSIT_AIR
ROAD = PitlaneStatus.IN_TRANSIT_ROAD
MANUFACTURED = PitlaneStatus.MANUFACTURED
DAMAGED = PitlaneStatus.DAMAGED
SCRAPPED = PitlaneStatus.SCRAPPED
CLEARED = PitlaneStatus.CLEARED

PITLANE = Dataset(
    name="pitlane",
    categories=[
        Category("pu", 1, [
            ("Power Unit ICE #1", TRACKSIDE, "Garage 1", 85, 4, 2),
            ("Power Unit MGU-H #1", AIR, "DHL Cargo", 92, 5, 5),
            ("Power Unit MGU-K #1", TRACKSIDE, "Garage 1", 88, 5, 1),
            ("Power Unit Turbocharger #1", DAMAGED, "Quarantine", 15, 0, 8),
            ("Power Unit ICE #2", TRACKSIDE, "Garage 2", 78, 3, 3),
            ("Power Unit MGU-K #2", MANUFACTURED, "Grove Factory", 100, 6, 14),
            ("Power Unit Battery #1", TRACKSIDE, "Garage 1", 94, 5, 2),
            ("Power Unit MGU-H #2", MANUFACTURED, "Grove Factory", 100, 6, 10),
        ]),
        Category("gb", 2, [
            ("Gearbox Casing Titanium #1", TRACKSIDE, "Garage 2", 78, 3, 3),
            ("Gearbox Sequential Actuator", TRACKSIDE, "Garage 2", 88, 4, 1),
            ("Gearbox Hydraulic System", TRACKSIDE, "Garage 1", 82, 4, 2),
            ("Gearbox Oil Cooler", AIR, "DHL Cargo", 45, 2, 6),
            ("Gearbox Casing Titanium #2", MANUFACTURED, "Grove Factory", 100, 6, 15),
            ("Gearbox Differential", TRACKSIDE, "Garage 1", 55, 2, 4),
        ]),
        Category("fw", 3, [
            ("Front Wing Assembly FW47 #1", TRACKSIDE, "Garage 1", 60, 2, 2),
            ("Front Wing Endplate Left", TRACKSIDE, "Garage 1", 80, 4, 4),
            ("Front Wing Flap Upper", MANUFACTURED, "Grove Factory", 100, 6, 6),
            ("Front Wing Mainplane High DF", TRACKSIDE, "Garage 2", 95, 5, 1),
            ("Front Wing Endplate Right", TRACKSIDE, "Garage 2", 72, 3, 3),
            ("Front Wing Nose Cone", MANUFACTURED, "Grove Factory", 100, 6, 10),
            ("Front Wing Cascade", AIR, "DHL Cargo", 90, 5, 4),
            ("Front Wing Assembly FW47 #2", MANUFACTURED, "Grove Factory", 100, 6, 20),
            ("Front Wing Flap Lower", TRACKSIDE, "Garage 2", 50, 2, 5),
        ]),
        Category("rw", 4, [
            ("Rear Wing DRS Mainplane", TRACKSIDE, "Garage 2", 40, 1, 1),
            ("Rear Wing DRS Actuator", AIR, "DHL Cargo", 100, 6, 7),
            ("Beam Wing Carbon", TRACKSIDE, "Garage 1", 70, 3, 2),
            ("Rear Wing Assembly FW47", TRACKSIDE, "Garage 1", 68, 3, 3),
            ("Rear Wing Endplate Left", MANUFACTURED, "Grove Factory", 100, 6, 12),
            ("Rear Wing Endplate Right", TRACKSIDE, "Garage 2", 85, 4, 2),
            ("Rear Wing Gurney Flap", AIR, "DHL Cargo", 95, 5, 3),
        ]),
        Category("fl", 5, [
            ("Floor Diffuser Carbon", TRACKSIDE, "Garage 1", 50, 2, 3),
            ("Floor Plank Wooden", TRACKSIDE, "Garage 2", 35, 1, 10),
            ("Floor Edge Wing", AIR, "DHL Cargo", 100, 6, 5),
            ("Floor Diffuser Carbon #2", MANUFACTURED, "Grove Factory", 100, 6, 8),
            ("Floor Skid Block", TRACKSIDE, "Garage 1", 75, 3, 4),
        ]),
        Category("sus", 6, [
            ("Front Wishbone Upper", TRACKSIDE, "Garage 1", 80, 4, 5),
            ("Front Wishbone Lower", TRACKSIDE, "Garage 2", 75, 3, 4),
            ("Rear Wishbone Upper", TRACKSIDE, "Garage 1", 82, 4, 3),
            ("Damper Front Left", MANUFACTURED, "Grove Factory", 100, 6, 15),
        ]),
        Category("wh", 7, [
            ('Wheel Rim Front Left 13"', TRACKSIDE, "Garage 1", 92, 5, 1),
            ('Wheel Rim Front Right 13"', TRACKSIDE, "Garage 1", 90, 5, 1),
            ('Wheel Rim Rear Left 13"', TRACKSIDE, "Garage 2", 88, 4, 2),
            ('Wheel Rim Rear Right 13"', TRACKSIDE, "Garage 2", 87, 4, 2),
        ]),
        Category("br", 8, [
            ("Brake Disc Front Carbon", TRACKSIDE, "Garage 1", 65, 3, 2),
            ("Brake Disc Rear Carbon", TRACKSIDE, "Garage 2", 58, 2, 3),
            ("Brake Caliper AP Racing", AIR, "DHL Cargo", 100, 6, 9),
        ]),
        Category("el", 9, [
            ("Steering Wheel Electronics", TRACKSIDE, "Garage 1", 96, 5, 1),
            ("ECU Standard FIA", TRACKSIDE, "Garage 2", 98, 6, 1),
            ("Wiring Loom Main", MANUFACTURED, "Grove Factory", 100, 6, 25),
        ]),
        Category("ch", 0, [
            ("Chassis Monocoque FW46", TRACKSIDE, "Garage 1", 90, 5, 10),
        ]),
    ],
)

# FW47 2025 season variant with incident notes. Not served unless
# PARTS_DATASET selects it.
WILLIAMS_2025 = Dataset(
    name="williams2025",
    key_width=4,
    categories=[
        Category("ch", 0, [
            ("Chassis Monocoque FW47 #1", CLEARED, "Garage 1", 85, 4, 2),
            ("Chassis Monocoque FW47 #2", CLEARED, "Garage 2", 78, 3, 3),
            ("Chassis Monocoque FW47 #3", MANUFACTURED, "Grove Factory", 100, 6, 30),
            ("Chassis Monocoque FW47 #4", SCRAPPED, "Recycling", 0, 0, 180, "Australia GP - Sainz Lap 1 crash"),
        ]),
        Category("gb", 1, [
            ("Gearbox Casing Titanium #1", CLEARED, "Garage 1", 82, 4, 2),
            ("Gearbox Casing Titanium #2", CLEARED, "Garage 2", 75, 3, 3),
            ("Gearbox Sequential Actuator #1", TRACKSIDE, "Garage 1", 88, 4, 1),
            ("Gearbox Sequential Actuator #2", TRACKSIDE, "Garage 2", 85, 4, 2),
            ("Gearbox Differential Unit", ROAD, "DHL - Abu Dhabi", 100, 6, 5),
            ("Gearbox Hydraulic System", MANUFACTURED, "Grove Factory", 100, 6, 15),
        ]),
        Category("fw", 2, [
            ("Front Wing Assembly FW47 Spec-B #1", CLEARED, "Garage 1", 75, 3, 1),
            ("Front Wing Assembly FW47 Spec-B #2", CLEARED, "Garage 2", 82, 4, 2),
            ("Front Wing Assembly FW47 Spec-A", MANUFACTURED, "Grove Factory", 100, 6, 20),
            ("Front Wing Endplate Left", TRACKSIDE, "Pit Wall", 90, 5, 3),
            ("Front Wing Endplate Right", TRACKSIDE, "Pit Wall", 88, 4, 3),
            ("Front Wing Nose Cone FW47 #1", CLEARED, "Garage 1", 80, 4, 2),
            ("Front Wing Nose Cone FW47 #2", CLEARED, "Garage 2", 78, 3, 3),
            ("Front Wing Assembly FW47 #8", SCRAPPED, "Recycling", 0, 0, 120, "Spanish GP - Albon contact Kick Sauber"),
            ("Front Wing Assembly FW47 #9", SCRAPPED, "Recycling", 0, 0, 120, "Spanish GP - Albon contact Lawson (2nd)"),
            ("Front Wing Assembly FW47 #10", SCRAPPED, "Recycling", 0, 0, 120, "Spanish GP - Sainz T1 start damage"),
        ]),
        Category("rw", 3, [
            ("Rear Wing DRS Mainplane High DF", CLEARED, "Garage 1", 68, 3, 2),
            ("Rear Wing DRS Mainplane Low DF", ROAD, "DHL Cargo", 100, 6, 5),
            ("Rear Wing DRS Actuator #1", CLEARED, "Garage 2", 85, 4, 1),
            ("Rear Wing Beam Wing Carbon", TRACKSIDE, "Garage 1", 72, 3, 3),
            ("Rear Wing Endplate Left", MANUFACTURED, "Grove Factory", 100, 6, 12),
            ("Rear Wing Endplate Right", TRACKSIDE, "Garage 2", 80, 4, 2),
        ]),
        Category("fl", 4, [
            ("Floor Underbody FW47 Spec-C #1", CLEARED, "Garage 1", 55, 2, 2),
            ("Floor Underbody FW47 Spec-C #2", CLEARED, "Garage 2", 60, 2, 3),
            ("Floor Diffuser Carbon", TRACKSIDE, "Pit Wall", 100, 6, 8),
            ("Floor Edge Wing", ROAD, "DHL Cargo", 95, 5, 4),
            ("Floor Skid Block Titanium", TRACKSIDE, "Garage 1", 40, 1, 1),
            ("Floor Underbody FW47 Spec-B", DAMAGED, "Grove Factory - Repair", 25, 0, 60, "Italian GP - Sainz/Bearman collision"),
        ]),
        Category("sp", 5, [
            ("Sidepod Left FW47 #1", CLEARED, "Garage 1", 78, 3, 2),
            ("Sidepod Right FW47 #1", CLEARED, "Garage 1", 80, 4, 2),
            ("Sidepod Left FW47 #2", CLEARED, "Garage 2", 72, 3, 3),
            ("Sidepod Right FW47 #2", CLEARED, "Garage 2", 75, 3, 3),
            ("Engine Cover FW47", MANUFACTURED, "Grove Factory", 100, 6, 10),
        ]),
        Category("sus", 6, [
            ("Front Wishbone Upper FL", CLEARED, "Garage 1", 82, 4, 2),
            ("Front Wishbone Lower FL", CLEARED, "Garage 1", 80, 4, 2),
            ("Front Wishbone Upper FR", CLEARED, "Garage 2", 78, 3, 3),
            ("Front Wishbone Lower FR", CLEARED, "Garage 2", 75, 3, 3),
            ("Rear Wishbone Upper RL", TRACKSIDE, "Garage 1", 85, 4, 2),
            ("Rear Wishbone Upper RR", TRACKSIDE, "Garage 2", 82, 4, 3),
            ("Front Upright Assembly FL", TRACKSIDE, "Pit Wall", 100, 6, 6),
            ("Damper Front Multimatic", MANUFACTURED, "Grove Factory", 100, 6, 15),
            ("Rear Wishbone Lower RR #3", DAMAGED, "Grove Factory - Repair", 15, 0, 90, "British GP - Sainz/Leclerc contact"),
        ]),
        Category("br", 7, [
            ("Brake Disc Front Carbon FL", CLEARED, "Garage 1", 45, 2, 1),
            ("Brake Disc Front Carbon FR", CLEARED, "Garage 1", 48, 2, 1),
            ("Brake Disc Rear Carbon RL", CLEARED, "Garage 2", 52, 2, 2),
            ("Brake Disc Rear Carbon RR", CLEARED, "Garage 2", 55, 2, 2),
            ("Brake Caliper Brembo FL", ROAD, "DHL Cargo", 100, 6, 7),
            ("Brake Duct Carbon FL", TRACKSIDE, "Pit Wall", 90, 5, 5),
            ("Brake System Complete FR", SCRAPPED, "Recycling", 0, 0, 100, "Austria GP - Sainz brake fire DNS"),
        ]),
        Category("st", 8, [
            ("Steering Wheel FW47 #1", CLEARED, "Garage 1", 92, 5, 1),
            ("Steering Wheel FW47 #2", CLEARED, "Garage 2", 90, 5, 2),
            ("Steering Rack Hydraulic", TRACKSIDE, "Garage 1", 85, 4, 3),
            ("Steering Column Assembly", MANUFACTURED, "Grove Factory", 100, 6, 20),
        ]),
        Category("wh", 9, [
            ('Wheel Rim BBS 13" FL', CLEARED, "Garage 1", 88, 4, 1),
            ('Wheel Rim BBS 13" FR', CLEARED, "Garage 1", 86, 4, 1),
            ('Wheel Rim BBS 13" RL', CLEARED, "Garage 2", 85, 4, 2),
            ('Wheel Rim BBS 13" RR', CLEARED, "Garage 2", 84, 4, 2),
        ]),
        Category("cl", 10, [
            ("Radiator Water Main #1", CLEARED, "Garage 1", 70, 3, 2),
            ("Radiator Oil Cooler #1", DAMAGED, "Quarantine", 20, 0, 110, "Canada GP - Albon cooling failure DNF"),
            ("Radiator Water Main #2", CLEARED, "Garage 2", 75, 3, 3),
            ("Cooling Duct Carbon Left", MANUFACTURED, "Grove Factory", 100, 6, 12),
        ]),
        Category("el", 11, [
            ("ECU Standard FIA #1", CLEARED, "Garage 1", 95, 5, 1),
            ("ECU Standard FIA #2", CLEARED, "Garage 2", 94, 5, 2),
            ("Wiring Loom Main", TRACKSIDE, "Pit Wall", 100, 6, 8),
            ("Telemetry Antenna Array", MANUFACTURED, "Grove Factory", 100, 6, 25),
        ]),
        Category("pu", 12, [
            ("Power Unit ICE M15 #1", CLEARED, "Garage 1", 68, 3, 1),
            ("Power Unit ICE M15 #2", CLEARED, "Garage 2", 72, 3, 2),
            ("Power Unit MGU-K", TRACKSIDE, "Garage 1", 80, 4, 3),
            ("Power Unit MGU-H", TRACKSIDE, "Garage 2", 78, 4, 4),
            ("Power Unit Turbocharger IHI", CLEARED, "Garage 1", 65, 3, 2),
            ("Power Unit Energy Store", CLEARED, "Garage 2", 82, 4, 3),
            ("Power Unit Control Electronics", ROAD, "DHL Cargo", 100, 6, 10),
        ]),
        Category("hl", 13, [
            ("Halo Titanium #1", CLEARED, "Garage 1", 95, 5, 5),
            ("Halo Titanium #2", CLEARED, "Garage 2", 92, 5, 6),
            ("Crash Structure Rear FIA", MANUFACTURED, "Grove Factory", 100, 6, 30),
            ("Crash Structure Rear #4", SCRAPPED, "Recycling", 0, 0, 200, "Bahrain GP - Sainz accident damage"),
        ]),
    ],
)

DATASETS = {dataset.name: dataset for dataset in (PITLANE, WILLIAMS_2025)}
DEFAULT_DATASET = PITLANE.name


def get_dataset(name):
    try:
        return DATASETS[name]
    except KeyError:
        raise KeyError(f"Unknown parts dataset {name!r}; expected one of {sorted(DATASETS)}") from None


def get_mock_parts():
    """Fixture provider: the default dataset's parts, stamped relative to now."""
    return generate_parts(PITLANE)
