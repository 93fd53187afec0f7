"""Name pools for generated players."""

from typing import Optional

from bullpen.core.rng import RandomSource, choice, default_source

FIRST_NAMES = [
    # American
    "Jake", "Mike", "Chris", "Matt", "Ryan", "Josh", "Tyler", "Brandon", "Justin", "Kyle",
    "Derek", "Kevin", "Adam", "Jason", "Brian", "Eric", "Andrew", "David", "James", "John",
    "Marcus", "Terrence", "Darius", "DeShawn", "Jamal", "Antonio", "Carlos", "Miguel",
    # Latino
    "Jose", "Juan", "Luis", "Pedro", "Rafael", "Fernando", "Roberto", "Eduardo", "Andres",
    "Diego", "Alejandro", "Gabriel", "Ricardo", "Victor", "Angel", "Francisco", "Manuel",
    "Hector", "Sergio",
    # Asian
    "Hiroshi", "Kenji", "Takeshi", "Yuki", "Shohei", "Kenta", "Masahiro", "Daisuke",
    "Ichiro", "Hideki", "Min-ho", "Sung-jin", "Ji-hoon", "Hyun-woo", "Seung-hwan",
    "Wei", "Chen", "Ming", "Lei", "Ping",
]

LAST_NAMES = [
    # American
    "Johnson", "Williams", "Brown", "Jones", "Miller", "Davis", "Wilson", "Moore", "Taylor",
    "Anderson", "Thomas", "Jackson", "White", "Harris", "Martin", "Thompson", "Garcia",
    "Martinez", "Robinson", "Clark", "Rodriguez", "Lewis", "Lee", "Walker", "Hall", "Allen",
    "Young", "King", "Wright", "Scott",
    # Latino
    "Gonzalez", "Lopez", "Hernandez", "Ramirez", "Torres", "Flores", "Rivera", "Gomez",
    "Sanchez", "Morales", "Ortiz", "Diaz", "Cruz", "Reyes", "Vargas", "Castillo", "Mendez",
    "Ramos", "Herrera", "Medina",
    # Asian
    "Suzuki", "Tanaka", "Yamamoto", "Watanabe", "Nakamura", "Kobayashi", "Takahashi",
    "Saito", "Matsui", "Ohtani", "Kim", "Park", "Choi", "Jung", "Kang", "Wang", "Zhang", "Liu",
]


def generate_name(source: Optional[RandomSource] = None) -> tuple[str, str]:
    """Random (first, last) name pair."""
    source = default_source(source)
    return choice(source, FIRST_NAMES), choice(source, LAST_NAMES)
