"""Shared fixtures for node-cleaner tests."""

import pytest


@pytest.fixture
def project_tree(tmp_path):
    """
    Build a tree with two reachable node_modules and one hidden under .git.

    Layout:
        a/node_modules/react/index.js
        b/c/node_modules/lodash/index.js
        .git/node_modules/
    """
    for target in (tmp_path / "a" / "node_modules", tmp_path / "b" / "c" / "node_modules"):
        package = target / ("react" if target.parent.name == "a" else "lodash")
        package.mkdir(parents=True)
        (package / "index.js").write_text("module.exports = {}")

    (tmp_path / ".git" / "node_modules").mkdir(parents=True)
    return tmp_path
