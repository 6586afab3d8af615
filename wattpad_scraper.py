from __future__ import annotations

from wattpad.__main__ import main


if __name__ == "__main__":
    main()
