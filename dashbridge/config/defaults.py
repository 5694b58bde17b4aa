"""dashbridge.config.defaults
==========================

Small, stable default values used across dashbridge and its service layer.
Only plain constants live here; this module imports nothing from the package
to avoid circular dependencies.
"""

from __future__ import annotations

# ---- Static config file ----
# Section of the static config file that holds the AIConfig fields.
CONFIG_SECTION = "dashscope_ai"
# Used when DASHBRIDGE_CONFIG_FILE is unset; missing files are ignored.
DEFAULT_CONFIG_FILE = "dashbridge.json"

# ---- HTTP provider (DashScope) ----
DASHSCOPE_BASE_URL = "https://dashscope.aliyuncs.com/compatible-mode/v1"
DASHSCOPE_CHAT_PATH = "chat/completions"
DASHSCOPE_EMBEDDINGS_PATH = "embeddings"
# Wire model used when AIConfig.model_name is empty.
DASHSCOPE_DEFAULT_CHAT_MODEL = "qwen-plus"
DASHSCOPE_DEFAULT_EMBEDDING_MODEL = "text-embedding-v1"

# ---- Service ----
SERVICE_DEFAULT_HOST = "127.0.0.1"
SERVICE_DEFAULT_PORT = 8091
DEFAULT_ENVIRONMENT = "production"
DEFAULT_GATE_POLICY = "auto"
WELCOME_MESSAGE = "Welcome to the dashbridge API!"
# Used by the config test routes when the body carries no prompt.
DEFAULT_TEST_PROMPT = "Hello"

