import subprocess


def health_check() -> str:
    """Return the installed git version, raising if git cannot be run."""
    result = subprocess.run(
        ["git", "--version"],
        check=True,
        capture_output=True,
        text=True,
        timeout=10,
    )
    return result.stdout.strip()
