"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from difftour.tour import Hunk


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_dir(temp_dir, mocker):
    """Point the global config directory at a temporary location."""
    mock_dir = temp_dir / ".difftour"
    mocker.patch("difftour.global_config._CONFIG_DIR", mock_dir)
    return mock_dir


@pytest.fixture
def sample_diff():
    """Two hunks in src/main.ts followed by one hunk in src/util.ts."""
    return """diff --git a/src/main.ts b/src/main.ts
index abc1234..def5678 100644
--- a/src/main.ts
+++ b/src/main.ts
@@ -1,3 +1,4 @@
 import { foo } from "./foo";
+import { bar } from "./bar";

 foo();
@@ -10,3 +11,5 @@ function greet() {
 function greet() {
+  console.log("hello");
+  console.log("world");
   return;
 }
diff --git a/src/util.ts b/src/util.ts
index 1234567..abcdefg 100644
--- a/src/util.ts
+++ b/src/util.ts
@@ -1,2 +1,3 @@
 const x = 10;
+const y = 20;
 export { x };
"""


@pytest.fixture
def text_block_diff():
    """A single text file block."""
    return """diff --git a/src/a.ts b/src/a.ts
index abc1234..def5678 100644
--- a/src/a.ts
+++ b/src/a.ts
@@ -1,2 +1,3 @@
 const a = 1;
+const b = 2;
 export { a };"""


@pytest.fixture
def binary_block_diff():
    """A single binary file block."""
    return """diff --git a/logo.png b/logo.png
new file mode 100644
index 0000000..abc1234
Binary files /dev/null and b/logo.png differ"""


@pytest.fixture
def deleted_file_diff():
    """A diff deleting src/old.ts."""
    return """diff --git a/src/old.ts b/src/old.ts
deleted file mode 100644
index abc1234..0000000
--- a/src/old.ts
+++ /dev/null
@@ -1,3 +0,0 @@
-export const greeting = "hello";
-export const farewell = "bye";
-export default greeting;"""


@pytest.fixture
def sample_hunks():
    """Three hunks across a TypeScript and a Python file."""
    return [
        Hunk(
            file="src/main.ts",
            start_line=1,
            end_line=4,
            header="@@ -1,3 +1,4 @@",
            diff='@@ -1,3 +1,4 @@\n import { foo } from "./foo";\n+import { bar } from "./bar";',
        ),
        Hunk(
            file="src/main.ts",
            start_line=11,
            end_line=15,
            header="@@ -10,3 +11,5 @@",
            diff='@@ -10,3 +11,5 @@\n function greet() {\n+  console.log("hello");',
        ),
        Hunk(
            file="scripts/deploy.py",
            start_line=7,
            end_line=7,
            header="@@ -7 +7 @@",
            diff="@@ -7 +7 @@\n-DEBUG = True\n+DEBUG = False",
        ),
    ]


@pytest.fixture
def sample_llm_response():
    """Sample raw model response referencing hunks by index."""
    return """{
    "title": "Add bar import and greeting",
    "summary": "Imports bar and makes greet print a message.",
    "sections": [
        {
            "heading": "New import",
            "explanation": "A new import for bar was added to main.ts.",
            "hunk_ids": [0]
        },
        {
            "heading": "Greeting",
            "explanation": "greet now logs two lines.",
            "hunk_ids": [1, 2],
            "language": "typescript"
        }
    ]
}"""
