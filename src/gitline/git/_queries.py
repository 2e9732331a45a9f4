"""Argument vectors for the read-only git queries issued per prompt.

Each tuple excludes the executable name; the runner prepends it.
"""

REV_PARSE: tuple[str, ...] = (
    "rev-parse",
    "--git-dir",
    "--is-inside-git-dir",
    "--is-bare-repository",
    "--is-inside-work-tree",
    "--short",
    "HEAD",
)
DIFF: tuple[str, ...] = ("diff", "--no-ext-diff", "--quiet")
DIFF_CACHED: tuple[str, ...] = ("diff", "--no-ext-diff", "--quiet", "--cached")
CHECK_STASH: tuple[str, ...] = ("rev-parse", "--verify", "--quiet", "refs/stash")
READ_HEAD: tuple[str, ...] = ("symbolic-ref", "HEAD")
DESCRIBE: tuple[str, ...] = ("describe", "--contains", "--all", "HEAD")
UPSTREAM: tuple[str, ...] = (
    "rev-list",
    "--count",
    "--left-right",
    "@{upstream}...HEAD",
)
