"""Entry point de desarrollo de hublink (sin `pip install -e .`).

Permite ejecutar la CLI desde un checkout con:
- `python -m main get users/octocat/repos`

Motivo:
- Los paquetes `core`, `adapters` y `cli` viven en `src/`; sin la instalación
  de setuptools (que expone el script `hublink`) Python no los encuentra.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
