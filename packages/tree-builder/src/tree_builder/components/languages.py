from collections.abc import Iterable

from .node import Language, LanguageStats, Node

# Checked in order, first suffix match wins.
LANGUAGE_SUFFIXES: tuple[tuple[str, Language], ...] = (
    (".js", Language.JS),
    (".ts", Language.TS),
    (".vue", Language.VUE),
    (".json", Language.JSON),
    (".html", Language.HTML),
    (".css", Language.CSS),
    (".java", Language.JAVA),
    (".cs", Language.CS),
    (".c", Language.C),
    (".cpp", Language.CPP),
)


def classify_language(filename: str) -> Language:
    """Return the language label for *filename* based on its suffix."""
    lowered = filename.lower()
    for suffix, language in LANGUAGE_SUFFIXES:
        if lowered.endswith(suffix):
            return language
    return Language.OTHER


def format_percentage(count: int, total: int) -> str:
    return f"{count / total * 100:.1f}%"


def aggregate_languages(children: Iterable[Node]) -> LanguageStats:
    """
    Compute the language breakdown of a directory from its built children.

    Every file below *children* is counted, however deep. ``counts`` keeps
    labels in the order they were first seen, and that order settles ties
    for the dominant language: a later label only takes over with a
    strictly greater share.

    Args:
        children: Fully built child nodes of the directory.

    Returns:
        A frozen :class:`LanguageStats`.
    """
    counts: dict[Language, int] = {}
    total_files = 0

    for child in children:
        for file_node in child.iter_files():
            total_files += 1
            language = classify_language(file_node.name)
            counts[language] = counts.get(language, 0) + 1

    percentages: dict[Language, str] = {}
    dominant = "none"
    max_share = 0.0

    for language, count in counts.items():
        share = count / total_files
        percentages[language] = format_percentage(count, total_files)
        if share > max_share:
            max_share = share
            dominant = language.value

    return LanguageStats(
        total_files=total_files,
        dominant_language=dominant.upper(),
        counts=counts,
        percentages=percentages,
    )
