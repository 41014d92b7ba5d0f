# main.py
"""
Komentorivi: tulostaa postinumeron lumitiedot JSON-muodossa.

    python main.py 70100 [raja]
"""

import json
import sys

from lumivahti.api import PostalCodeNotFoundError, get_snow_data
from lumivahti.logger_config import setup_logging

logger = setup_logging()


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Käyttö: python main.py POSTINUMERO [RAJA]", file=sys.stderr)
        return 2

    postal_code = args[0].strip()
    try:
        threshold = int(args[1]) if len(args) > 1 else None
    except ValueError:
        print(f"Virheellinen raja: {args[1]}", file=sys.stderr)
        return 2

    try:
        result = get_snow_data(postal_code, threshold)
    except PostalCodeNotFoundError as e:
        logger.warning("Postal code %s not found", postal_code)
        print(json.dumps({"message": e.message, "error": e.error}, ensure_ascii=False))
        return 1

    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
