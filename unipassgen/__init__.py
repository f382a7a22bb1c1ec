from .generate import generate, shuffle, PasswordGenerator, PassgenException, LengthTypeError, LengthRangeError
from .pool import get_character_list, get_character_sets, build_pool
from .options import normalize, Options, CharSetSpec
from .charsets import CharRange, ALIASES, is_int
from .config import load_options, save_options, read_toml, ConfigException
