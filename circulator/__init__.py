from .participant import Participant, CIRCLE_COUNT
from .ordering import group_buckets, order_by_group_variety
from .seed import SEED_SIZE, SEED_OFFSETS, build_seed_graph
from .insertion import insert, InsertionError
from .circulator import Circulator
from .parser import parse_participant, parse_participants, ParseError
from .generate import generate_participants
from .printer import format_circle, format_circles
from .consistency import check_circles, CircleWarning
from .validate import validate, ValidationError
from .stats import count_disjoint_circles, disjoint_ratio
from .config import CirculatorOptions, get_default_options, set_default_options

__all__ = [
    'Participant',
    'CIRCLE_COUNT',
    'group_buckets',
    'order_by_group_variety',
    'SEED_SIZE',
    'SEED_OFFSETS',
    'build_seed_graph',
    'insert',
    'InsertionError',
    'Circulator',
    'parse_participant',
    'parse_participants',
    'ParseError',
    'generate_participants',
    'format_circle',
    'format_circles',
    'check_circles',
    'CircleWarning',
    'validate',
    'ValidationError',
    'count_disjoint_circles',
    'disjoint_ratio',
    'CirculatorOptions',
    'get_default_options',
    'set_default_options',
]
