import json

import pytest


@pytest.fixture
def rules_file(tmp_path):
    def _rules_file(rules):
        path = tmp_path / "rules.json"
        path.write_text(json.dumps(rules))
        return path

    return _rules_file
