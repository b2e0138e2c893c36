"""Skip rules for the directory walk.

Decides, from a directory's base name alone, whether it is a deletion
target or should be pruned from traversal.
"""

TARGET_NAME = "node_modules"

# Directories never descended into (version control + OS system folders)
SKIP_DIRECTORIES = frozenset(
    {
        ".git",
        ".svn",
        ".hg",
        "System Volume Information",  # Windows
        "$RECYCLE.BIN",
        ".DS_Store",  # macOS
        ".Trash",
        "proc",  # Linux pseudo filesystems
        "sys",
        "dev",
        "Windows",
        "Program Files",
        "Program Files (x86)",
    }
)

# Hidden directories that may still contain projects (package manager caches)
ALLOWED_HIDDEN_DIRECTORIES = frozenset({".npm", ".yarn", ".pnpm"})


def is_target(name: str) -> bool:
    """Return True if a directory with this name should be deleted."""
    return name == TARGET_NAME


def should_prune(name: str) -> bool:
    """
    Return True if the walk must not descend into this directory.

    Args:
        name: Base name of the directory (not a full path)

    Returns:
        True for known system directories and for hidden directories
        other than the allowed package manager caches
    """
    if name in SKIP_DIRECTORIES:
        return True

    if name.startswith("."):
        return name not in ALLOWED_HIDDEN_DIRECTORIES

    return False
