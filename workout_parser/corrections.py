"""Misspelling -> canonical form table used by the spelling corrector.

The table is a read-only module constant. Its insertion order is significant:
the fuzzy pass takes the first close key in this order, and the substring pass
breaks ties between equally long keys with it.
"""
from types import MappingProxyType
from typing import Dict, Mapping

_CORRECTIONS: Dict[str, str] = {
    # dumbbell
    "dumbell": "dumbbell",
    "dumbel": "dumbbell",
    "dumble": "dumbbell",
    "dumbbel": "dumbbell",
    "dumbells": "dumbbells",
    "dumbel rows": "dumbbell rows",
    "dumbell rows": "dumbbell rows",
    "db": "dumbbell",

    # barbell
    "barbal": "barbell",
    "barbel": "barbell",
    "bb": "barbell",

    # bench
    "banch": "bench",
    "bech": "bench",
    "benchpress": "bench press",

    # squat
    "sqaut": "squat",
    "squats": "squat",
    "squatt": "squat",

    # deadlift
    "deadlif": "deadlift",
    "deadlifts": "deadlift",
    "dealift": "deadlift",
    "dedlift": "deadlift",
    "dl": "deadlift",

    # row
    "rows": "row",
    "rwo": "row",
    "rwos": "rows",

    # press
    "pres": "press",
    "presse": "press",
    "ohp": "overhead press",

    # pull-up / chin-up
    "pullup": "pull-up",
    "pullups": "pull-ups",
    "pull up": "pull-up",
    "pull ups": "pull-ups",
    "chinup": "chin-up",
    "chinups": "chin-ups",
    "chin up": "chin-up",

    # push-up
    "pushup": "push-up",
    "pushups": "push-ups",
    "push up": "push-up",
    "push ups": "push-ups",

    # curl
    "curls": "curl",
    "bicep": "biceps",
    "bicep curl": "biceps curl",

    # triceps
    "tricep": "triceps",
    "tricep pushdown": "triceps pushdown",
    "tricep extension": "triceps extension",

    # lateral
    "lat": "lateral",
    "lats": "lateral",
    "lat raise": "lateral raise",

    # incline / decline
    "inclin": "incline",
    "declin": "decline",

    # fly
    "flys": "fly",
    "flies": "fly",
    "flyes": "fly",

    # legs
    "leg curl": "leg curl",
    "legcurl": "leg curl",
    "leg extension": "leg extension",
    "legextension": "leg extension",
    "leg press": "leg press",
    "legpress": "leg press",

    # calves
    "calf raise": "calf raise",
    "calfraise": "calf raise",
    "calfs": "calves",

    # shoulders
    "sholder": "shoulder",
    "sholders": "shoulders",
    "shouler": "shoulder",

    # chest
    "ches": "chest",

    # hip thrust
    "hipthrust": "hip thrust",
    "hip trusts": "hip thrust",

    # lunge
    "lunges": "lunge",
    "lungee": "lunge",

    # core
    "planks": "plank",
    "crunchs": "crunch",
    "crunches": "crunch",

    # traps
    "shrugs": "shrug",
}

EXERCISE_CORRECTIONS: Mapping[str, str] = MappingProxyType(_CORRECTIONS)
