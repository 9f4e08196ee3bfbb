"""Configuration and runtime constants."""

import os
from dotenv import load_dotenv

load_dotenv()

# API Keys
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")

# Model Configuration
MODEL_NAME = os.getenv("MODEL_NAME", "gemini-2.5-flash")
API_BASE_URL = os.getenv("API_BASE_URL", "https://generativelanguage.googleapis.com/v1beta")

# Output size caps (maxOutputTokens)
WORD_MAX_TOKENS = int(os.getenv("WORD_MAX_TOKENS", "256"))
BATCH_TOKENS_BASE = int(os.getenv("BATCH_TOKENS_BASE", "512"))
BATCH_TOKENS_PER_ITEM = int(os.getenv("BATCH_TOKENS_PER_ITEM", "64"))
VALIDATION_MAX_TOKENS = int(os.getenv("VALIDATION_MAX_TOKENS", "512"))

# Thinking tokens count against maxOutputTokens on 2.5 models; 0 disables thinking
THINKING_BUDGET = int(os.getenv("THINKING_BUDGET", "0"))

# Batch Configuration
DEFAULT_BATCH_SIZE = int(os.getenv("DEFAULT_BATCH_SIZE", "20"))

# Testing Configuration
LIVE_TESTING = os.getenv("WORDPAIRS_LIVE", "0") == "1"
