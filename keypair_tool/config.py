

# --- Key source ---
# Environment variable holding the base58 private key (also read from .env)
PRIVATE_KEY_ENV = "SOLANA_PRIVATE_KEY"

# === SOLANA KEY SIZES ===
SEED_LENGTH = 32
PUBLIC_KEY_LENGTH = 32
SECRET_KEY_LENGTH = SEED_LENGTH + PUBLIC_KEY_LENGTH  # seed followed by pubkey

# 📍 Wallet file written by keygen (solana-keygen JSON array format)
DEFAULT_WALLET_FILE = "dev-wallet.json"
WALLET_FILE_MODE = 0o600

# Logging details
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
