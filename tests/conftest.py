import sys
from pathlib import Path

import pytest


def _add_src_to_path() -> None:
    root = Path(__file__).resolve().parents[1]
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


_add_src_to_path()


CARD_SNIPPET = "\n".join(
    [
        "import React, { useState } from 'react';",
        "import { motion } from 'framer-motion';",
        "import clsx from 'clsx';",
        "import { Icon } from './Icon';",
        "",
        "/**",
        " * Displays a product summary card.",
        " * @param props card properties",
        " */",
        "export default function ProductCard(props) {",
        "  const [open, setOpen] = useState(false);",
        "  return <motion.div className={clsx('card', open && 'open')} />;",
        "}",
    ]
)


@pytest.fixture
def card_snippet() -> str:
    return CARD_SNIPPET
