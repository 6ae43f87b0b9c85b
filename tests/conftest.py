from __future__ import annotations

from pathlib import Path

import pytest

NOTEBOOK_HTML = """<html>
<head><meta charset="UTF-8"><title>Notebook</title></head>
<body>
<div class="bodyContainer">
  <div class="notebookFor">Notebook Export</div>
  <div class="bookTitle">
    Republic
  </div>
  <div class="authors">Plato; Jowett, Benjamin</div>
  <hr>
  <h2 class="sectionHeading">Book I</h2>
  <h3 class="noteHeading">Highlight (<span class="highlight_yellow">yellow</span>) - Page 3</h3>
  <div class="noteText">
    Justice is the interest of the stronger.
  </div>
  <h3 class="noteHeading">Bookmark - Page 7</h3>
  <h3 class="noteHeading">Highlight (<span class="highlight_blue">blue</span>) - Page 9</h3>
  <div class="noteText">The beginning is the most important part of the work.</div>
</div>
</body>
</html>
"""


@pytest.fixture
def notebook_html() -> str:
    return NOTEBOOK_HTML


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty directory with no config override."""

    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("NOTEBOOK_EXPORT_CONFIG", raising=False)
    return tmp_path
