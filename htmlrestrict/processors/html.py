from html.parser import HTMLParser

from htmlrestrict.processors.events import TagClose, TagOpen, Text

SELF_CLOSING_ATTR = "/"


class HTMLTokenizer(HTMLParser):
    """
    Decompose markup into document ordered events, with minimal processing:
      - tag and attribute names are lowercased, attribute values decoded
      - `<tag />` is reported as self closing, with a `/` pseudo attribute
      - end tags, text, entity and character references keep their source text
      - comments, declarations and processing instructions are discarded

    Each event is handed to one of the `on_tag_open`, `on_tag_close` and
    `on_text` callbacks as soon as it is parsed.
    """

    def __init__(self, on_tag_open, on_tag_close, on_text):
        super().__init__(convert_charrefs=False)
        self.on_tag_open = on_tag_open
        self.on_tag_close = on_tag_close
        self.on_text = on_text
        self._endtag = None
        self._in_endtag = False
        self._in_reference = False

    def handle_starttag(self, tag, attrs):
        self.on_tag_open(TagOpen(tag, list(attrs), False, self.get_starttag_text()))

    def handle_startendtag(self, tag, attrs):
        attrs = list(attrs) + [(SELF_CLOSING_ATTR, SELF_CLOSING_ATTR)]
        self.on_tag_open(TagOpen(tag, attrs, True, self.get_starttag_text()))

    def parse_endtag(self, i):
        self._in_endtag = True
        try:
            j = super().parse_endtag(i)
        finally:
            self._in_endtag = False

        if self._endtag is not None:
            tag, self._endtag = self._endtag, None
            self.on_tag_close(TagClose(tag, self.rawdata[i:j]))
        return j

    def handle_endtag(self, tag):
        # the source span is only known once parse_endtag returns
        if self._in_endtag:
            self._endtag = tag
        else:
            self.on_tag_close(TagClose(tag, f"</{tag}>"))

    def handle_data(self, data):
        self.on_text(Text(data))

    def handle_entityref(self, name):
        self._in_reference = True

    def handle_charref(self, name):
        self._in_reference = True

    def updatepos(self, i, j):
        # references are followed by the update of the scan position, which
        # excludes the terminating character unless it is a semicolon
        if self._in_reference:
            self._in_reference = False
            self.on_text(Text(self.rawdata[i:j]))
        return super().updatepos(i, j)

    def parse(self, content):
        self.feed(content)
        self.close()

    @classmethod
    def tokenize(cls, content):
        events = []
        tokenizer = cls(events.append, events.append, events.append)
        tokenizer.parse(content)
        return events
