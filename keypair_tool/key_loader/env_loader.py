# key_loader/env_loader.py
import os
from dotenv import load_dotenv

from keypair_tool.config import PRIVATE_KEY_ENV

load_dotenv()

def get_private_key(var_name: str = PRIVATE_KEY_ENV) -> str:
    private_key = (os.getenv(var_name) or "").strip()
    if not private_key:
        raise RuntimeError(f"{var_name} not set in environment or .env")
    return private_key
