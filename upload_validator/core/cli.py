import asyncio
import sys

from upload_validator.core.config import settings
from upload_validator.schemas.validation import ValidationOptions

USAGE = (
    "Usage: validate-file <path> [--whitelist NAME ...] "
    "[--max-size BYTES] [--no-content-check]"
)


def validate_file():
    """Validate a file on disk - usage: validate-file invoice.pdf --whitelist Metadata."""
    from upload_validator.services.file_loader import validate_file as _validate_file

    args = sys.argv[1:]
    path = None
    whitelist: set[str] = set(settings.PDF_WHITELIST)
    max_size = settings.MAX_UPLOAD_SIZE_BYTES
    check_content = settings.CHECK_CONTENT
    i = 0
    while i < len(args):
        if args[i] == "--whitelist" and i + 1 < len(args):
            whitelist.add(args[i + 1])
            i += 2
            continue
        if args[i] == "--max-size" and i + 1 < len(args):
            if not args[i + 1].isdigit() or int(args[i + 1]) <= 0:
                print(f"Invalid --max-size: {args[i + 1]}")
                sys.exit(2)
            max_size = int(args[i + 1])
            i += 2
            continue
        if args[i] == "--no-content-check":
            check_content = False
            i += 1
            continue
        if not args[i].startswith("-"):
            path = args[i]
            i += 1
            continue
        i += 1
    if not path:
        print(USAGE)
        print("Example: validate-file report.pdf --whitelist Metadata --whitelist OpenAction")
        sys.exit(2)

    options = ValidationOptions(
        max_size_bytes=max_size,
        check_content=check_content,
        whitelist=whitelist,
    )
    verdict = asyncio.run(_validate_file(path, options))
    print(f"{'PASS' if verdict.passed else 'FAIL'}: {verdict.message}")
    sys.exit(0 if verdict.passed else 1)
