import os
import random
import time
from typing import Any

def safe_int_convert(value: Any, default: int = 0) -> int:
    try:
        s = str(value)
        if '.' in s:
            return int(float(value))
        return int(value)
    except (ValueError, TypeError):
        return default

def unique_filename(original: str) -> str:
    """Build "<base>-<epoch ms>-<random><ext>" so uploads never overwrite each other."""
    base, ext = os.path.splitext(os.path.basename(original))
    suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
    return f"{base}-{suffix}{ext}"
