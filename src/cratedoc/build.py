import os
import shlex
import subprocess
from .core import make_log

DOC_BUILD_COMMAND = os.getenv("DOC_BUILD_COMMAND", "cargo doc")


def build_docs(cwd=None, command=None, log_callback=None, verbose=False):
    """Regenerate the local documentation cache by running the doc tool.

    Returns True when the tool ran and exited cleanly.
    """
    log = make_log(log_callback, verbose)
    cmd = shlex.split(command or DOC_BUILD_COMMAND)
    log(f"Running command: {' '.join(cmd)}", verbose_only=True)
    try:
        subprocess.check_call(cmd, cwd=cwd)
    except FileNotFoundError:
        log(f"Error: could not find {cmd[0]}")
        return False
    except subprocess.CalledProcessError as e:
        log(f"Documentation build failed with error: {e}")
        return False
    log("Documentation build finished.")
    return True
