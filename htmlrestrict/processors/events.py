from dataclasses import dataclass, field


@dataclass
class TagOpen:
    name: str
    attributes: list = field(default_factory=list)
    self_closing: bool = False
    raw_text: str = ""

    def get(self, attr):
        """Return the value of the first `attr` pair, None if absent."""
        for key, value in self.attributes:
            if key == attr:
                return value
        return None

    def has(self, attr):
        return any(key == attr for key, _ in self.attributes)


@dataclass
class TagClose:
    name: str
    raw_text: str = ""


@dataclass
class Text:
    raw_text: str
