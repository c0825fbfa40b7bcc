import json
from types import MappingProxyType

from htmlrestrict.config import RestrictConfig
from htmlrestrict.errors import RestrictError
from htmlrestrict.processors.html import SELF_CLOSING_ATTR


class RuleSet:
    """
    Whitelist of allowed tags, each with the ordered list of attributes it may
    keep. Tags missing from the rules are stripped, their text is not.

    The `/` attribute name is a sentinel: when listed, a self closing slash
    present in the source tag is kept in the output.

    :param rules: mapping of tag name to an iterable of attribute names
    """

    def __init__(self, rules=None):
        self._rules = MappingProxyType({})
        self.set(rules or {})

    def get(self):
        return self._rules

    def set(self, rules):
        if isinstance(rules, RuleSet):
            rules = rules.get()
        self._rules = MappingProxyType({tag: tuple(attrs) for tag, attrs in rules.items()})

    def allows(self, tag):
        return tag in self._rules

    def attributes(self, tag):
        return self._rules.get(tag, ())

    def preserves_slash(self, tag):
        return SELF_CLOSING_ATTR in self.attributes(tag)

    @classmethod
    def from_json(cls, path):
        with open(path, encoding=RestrictConfig.ENCODING) as f:
            rules = json.load(f)
        if not isinstance(rules, dict):
            raise RestrictError(f"{path}: rules must be a JSON object of tag to attribute list")

        try:
            return cls(rules)
        except TypeError as exc:
            raise RestrictError(f"{path}: attributes must be lists of names ({exc})") from exc

    def __len__(self):
        return len(self._rules)

    def __repr__(self):
        return f"RuleSet({sorted(self._rules)})"
