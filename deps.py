"""Centralized imports for the entire project (app + skript_analyzer)."""

# Standard library
import json
import logging
import os
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

# External
from dotenv import load_dotenv
from fastapi import (
    File,
    Form,
    HTTPException,
    UploadFile,
)
from fastapi.responses import PlainTextResponse
from openai import (
    APIConnectionError,
    APIError,
    APITimeoutError,
    AuthenticationError,
    OpenAI,
    RateLimitError,
)
