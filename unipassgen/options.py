from collections.abc import Mapping
from dataclasses import dataclass
import logging
import jsonschema

from .charsets import CharRange, BMP_MAX, resolve_range

logger = logging.getLogger(__name__)

def _is_array(checker, instance):
    return isinstance(instance, (list, tuple))

def _is_object(checker, instance):
    return isinstance(instance, Mapping)

# Raw options come from Python callers as well as from TOML files, so tuples
# and arbitrary mappings have to pass as JSON arrays and objects.
OptionsValidator = jsonschema.validators.extend(
    jsonschema.Draft7Validator,
    type_checker=jsonschema.Draft7Validator.TYPE_CHECKER.redefine_many({
        "array": _is_array,
        "object": _is_object,
    }),
)

char_set_schema = {
    "$schema": "http://json-schema.org/draft-07/schema",
    "title": "Character set entry",
    "type": "object",
    "properties": {
        "chars": {
            "type": "array",
            "description": "Array of ranges, each [start] or [start, end]"
        }
    },
    "required": ["chars"]
}

min_schema = {
    "$schema": "http://json-schema.org/draft-07/schema",
    "description": "Minimum number of characters drawn from a set",
    "type": "integer",
    "exclusiveMinimum": 0
}

char_set_validator = OptionsValidator(char_set_schema)
min_validator = OptionsValidator(min_schema)


@dataclass(frozen=True)
class CharSetSpec:
    ranges: tuple[CharRange, ...]
    min: int = 0

    @classmethod
    def from_raw(cls, raw):
        """
        Builds a CharSetSpec from a raw entry like
        ``{"chars": [["a", "z"], ["0"]], "min": 2}``.

        Returns:
            CharSetSpec, or None if the entry is malformed.
        """
        if not char_set_validator.is_valid(raw):
            logger.debug("Skipping malformed character set %r", raw)
            return None

        ranges = []
        for entry in raw["chars"]:
            ranges.extend(resolve_range(entry))

        min_count = 0
        if "min" in raw and min_validator.is_valid(raw["min"]):
            min_count = int(raw["min"])

        return cls(tuple(ranges), min_count)

    def dict(self):
        return {
            "chars": [[r.start, r.end] for r in self.ranges],
            "min": self.min,
        }


@dataclass(frozen=True)
class Options:
    include: tuple[CharSetSpec, ...]
    exclude: tuple[CharSetSpec, ...] = ()

    @classmethod
    def default(cls):
        return cls(
            include=(CharSetSpec((CharRange(0x0000, BMP_MAX),), 0),),
            exclude=(),
        )

    def dict(self):
        return {
            "include": [spec.dict() for spec in self.include],
            "exclude": [spec.dict() for spec in self.exclude],
        }


def _normalize_specs(raw_specs) -> tuple[CharSetSpec, ...]:
    specs = []
    for raw in raw_specs:
        spec = CharSetSpec.from_raw(raw)
        if spec:
            specs.append(spec)
    return tuple(specs)

def normalize(raw_options=None) -> Options:
    """
    Turns raw caller options into an Options object.

    Args:
        raw_options: None, an Options object (returned as it is) or a mapping
            with optional "include" and "exclude" lists. Unknown keys and
            values of the wrong type are ignored.

    Returns:
        Options. This function never raises on malformed input, it drops it.
    """
    if isinstance(raw_options, Options):
        return raw_options

    opts = Options.default()
    if not isinstance(raw_options, Mapping):
        if raw_options is not None:
            logger.debug("Ignoring options of type %s", type(raw_options).__name__)
        return opts

    include = opts.include
    exclude = opts.exclude

    raw_include = raw_options.get("include")
    if isinstance(raw_include, (list, tuple)):
        include = _normalize_specs(raw_include)
    elif raw_include is not None:
        logger.debug("Ignoring non-list include option %r", raw_include)

    raw_exclude = raw_options.get("exclude")
    if isinstance(raw_exclude, (list, tuple)):
        exclude = _normalize_specs(raw_exclude)
    elif raw_exclude is not None:
        logger.debug("Ignoring non-list exclude option %r", raw_exclude)

    return Options(include, exclude)
