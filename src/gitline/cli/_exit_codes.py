"""Exit codes for the prompt command.

- 0: The prompt was written completely
- 1: Standard output could not be written
"""

EXIT_SUCCESS: int = 0
EXIT_WRITE_ERROR: int = 1
