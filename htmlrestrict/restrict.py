import logging
import re

from htmlrestrict.config import RestrictConfig, get_logger
from htmlrestrict.errors import InvalidInputError
from htmlrestrict.processors.html import SELF_CLOSING_ATTR, HTMLTokenizer
from htmlrestrict.rules import RuleSet


class OutputBuffer:
    """Text accumulated by a single `HTMLRestrict.process` call."""

    def __init__(self):
        self.parts = []

    def append(self, text):
        self.parts.append(text)

    def getvalue(self):
        return "".join(self.parts)


class HTMLRestrict:
    """
    Strip away every tag and attribute not explicitly allowed by the rules,
    keeping all text content.

    Allowed tags are rebuilt rather than copied: their attributes are written
    in the order the rules list them, so

        HTMLRestrict({"img": ["src", "alt", "/"]}).process('<img alt="me" id="x" src="a.jpg" />')

    returns `<img src="a.jpg" alt="me" />`.

    Open and close tags are checked against the rules independently, there is
    no nesting stack, so unbalanced markup still yields its text.

    :param rules: mapping of tag name to allowed attribute names, deny-all by default
    :param debug: trace every parser event through the logger
    """

    def __init__(self, rules=None, debug=None):
        self._rules = RuleSet(rules)
        self.debug = RestrictConfig.DEBUG if debug is None else debug
        self.logger = get_logger("htmlrestrict.restrict")
        self.tracer = get_logger("htmlrestrict.trace", level=logging.DEBUG)

    def get_rules(self):
        return self._rules.get()

    def set_rules(self, rules):
        """Replace the rules wholesale, changes are not cumulative."""
        self._rules = RuleSet(rules)
        self.logger.debug(f"Rules replaced: {len(self._rules)} tags allowed")

    rules = property(get_rules, set_rules)

    def build_tag(self, rules, event):
        more = ""
        for attr in rules.attributes(event.name):
            if attr != SELF_CLOSING_ATTR and event.has(attr):
                value = event.get(attr)
                # valueless attributes, e.g. <input checked>
                if value is None:
                    value = attr
                more += f' {attr}="{value}" '

        # a closing slash is kept only if the rules allow it
        if event.self_closing and event.has(SELF_CLOSING_ATTR) and rules.preserves_slash(event.name):
            more += " /"

        elem = f"<{event.name} {more}>"
        elem = re.sub(r"\s*>", ">", elem)
        elem = re.sub(r"\s+", " ", elem)
        return elem

    def process(self, content=None):
        if not isinstance(content, str):
            self.logger.warning(f"Refusing to process {type(content).__name__} content")
            raise InvalidInputError(content)

        rules = self._rules
        output = OutputBuffer()

        def on_tag_open(event):
            if self.debug:
                self.tracer.debug(f"start: {event.name} {event.attributes}")
            if rules.allows(event.name):
                output.append(self.build_tag(rules, event))

        def on_tag_close(event):
            if self.debug:
                self.tracer.debug(f"end: {event.name}")
            if rules.allows(event.name):
                output.append(event.raw_text)

        def on_text(event):
            if self.debug:
                self.tracer.debug(f"text: {event.raw_text!r}")
            output.append(event.raw_text)

        tokenizer = HTMLTokenizer(on_tag_open, on_tag_close, on_text)
        tokenizer.parse(content)
        return output.getvalue()


def restrict(content, rules=None):
    return HTMLRestrict(rules).process(content)
