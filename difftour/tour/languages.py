"""Language inference for difftour tour module.

Contains:
- EXTENSION_LANGUAGES: Read-only mapping of file extension to language label
- infer_language: Guess the language of a single file path
- infer_group_language: Majority vote over a list of file paths
"""

from types import MappingProxyType
from typing import Iterable, Optional


EXTENSION_LANGUAGES = MappingProxyType({
    "ts": "typescript",
    "tsx": "tsx",
    "js": "javascript",
    "jsx": "jsx",
    "mjs": "javascript",
    "cjs": "javascript",
    "mts": "typescript",
    "cts": "typescript",
    "py": "python",
    "rb": "ruby",
    "rs": "rust",
    "go": "go",
    "java": "java",
    "kt": "kotlin",
    "kts": "kotlin",
    "swift": "swift",
    "c": "c",
    "h": "c",
    "cpp": "cpp",
    "cc": "cpp",
    "cxx": "cpp",
    "hpp": "cpp",
    "cs": "csharp",
    "php": "php",
    "sh": "bash",
    "bash": "bash",
    "zsh": "bash",
    "css": "css",
    "scss": "scss",
    "less": "less",
    "html": "html",
    "htm": "html",
    "vue": "vue",
    "svelte": "svelte",
    "json": "json",
    "yaml": "yaml",
    "yml": "yaml",
    "toml": "toml",
    "md": "markdown",
    "mdx": "mdx",
    "sql": "sql",
    "graphql": "graphql",
    "gql": "graphql",
    "xml": "xml",
    "lua": "lua",
    "zig": "zig",
    "dart": "dart",
    "r": "r",
    "ex": "elixir",
    "exs": "elixir",
    "erl": "erlang",
    "hs": "haskell",
    "scala": "scala",
    "clj": "clojure",
    "tf": "hcl",
})


def infer_language(path: str) -> Optional[str]:
    """Guess the language of a file from its extension.

    Args:
        path: File path (e.g., "src/main.ts")

    Returns:
        Language label, or None for unknown or missing extensions
    """
    if "." not in path:
        return None
    extension = path.rsplit(".", 1)[1].lower()
    return EXTENSION_LANGUAGES.get(extension)


def infer_group_language(paths: Iterable[str]) -> Optional[str]:
    """Pick the most common language across a group of file paths.

    Paths without a known language do not vote. On a tie the language
    seen first wins.

    Args:
        paths: File paths in the group

    Returns:
        Dominant language label, or None if no path has a known language
    """
    counts: dict[str, int] = {}
    for path in paths:
        language = infer_language(path)
        if language:
            counts[language] = counts.get(language, 0) + 1

    best: Optional[str] = None
    best_count = 0
    for language, count in counts.items():
        if count > best_count:
            best = language
            best_count = count
    return best
