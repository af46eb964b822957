"""Configuration from environment."""

from deps import Path, load_dotenv, os

from skript_analyzer.thresholds import DEFAULT_THRESHOLDS, Thresholds

ENV_FILE = Path(".env")

load_dotenv(ENV_FILE)

SUPPORTED_EXTENSIONS = (
    ".sk", ".js", ".jsx", ".ts", ".tsx", ".json", ".yml", ".yaml", ".py", ".java",
)


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, str(default)))
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.environ.get(name, str(default)))
    except ValueError:
        return default


def get_ai_api_key() -> str:
    """API key for the OpenAI-compatible backend (required for /optimize)."""
    return os.environ.get("AI_API_KEY", "").strip()


def get_ai_base_url() -> str:
    """Base URL of the OpenAI-compatible backend. Default: Together.ai."""
    return os.environ.get("AI_BASE_URL", "https://api.together.xyz/v1").strip()


def get_ai_model() -> str:
    """Model name. Default: deepseek-ai/DeepSeek-V3.1."""
    return os.environ.get("AI_MODEL", "deepseek-ai/DeepSeek-V3.1").strip()


def get_ai_timeout() -> float:
    """Seconds before an optimization request is abandoned."""
    return _env_float("AI_TIMEOUT", 120.0)


def get_ai_max_tokens() -> int:
    return _env_int("AI_MAX_TOKENS", 8000)


def get_ai_temperature() -> float:
    return _env_float("AI_TEMPERATURE", 0.2)


def get_host() -> str:
    return os.environ.get("HOST", "0.0.0.0").strip()


def get_port() -> int:
    return _env_int("PORT", 8000)


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper()


def get_max_file_size() -> int:
    """Per-file upload limit in bytes (5 MB)."""
    return _env_int("MAX_FILE_SIZE", 5 * 1024 * 1024)


def get_max_files() -> int:
    return _env_int("MAX_FILES", 50)


def get_max_total_size() -> int:
    """Limit on the sum of all uploaded files in bytes (50 MB)."""
    return _env_int("MAX_TOTAL_SIZE", 50 * 1024 * 1024)


def get_thresholds() -> Thresholds:
    """Analyzer thresholds; each field can be overridden with SKRIPT_<FIELD>."""
    d = DEFAULT_THRESHOLDS
    return Thresholds(
        max_file_size=_env_int("SKRIPT_MAX_FILE_SIZE", d.max_file_size),
        many_commands_per_file=_env_int("SKRIPT_MANY_COMMANDS_PER_FILE", d.many_commands_per_file),
        reuse_min_commands=_env_int("SKRIPT_REUSE_MIN_COMMANDS", d.reuse_min_commands),
        reuse_max_functions=_env_int("SKRIPT_REUSE_MAX_FUNCTIONS", d.reuse_max_functions),
        gui_min_commands=_env_int("SKRIPT_GUI_MIN_COMMANDS", d.gui_min_commands),
        database_min_variables=_env_int("SKRIPT_DATABASE_MIN_VARIABLES", d.database_min_variables),
        performance_min_lines=_env_int("SKRIPT_PERFORMANCE_MIN_LINES", d.performance_min_lines),
        performance_file_complexity=_env_int(
            "SKRIPT_PERFORMANCE_FILE_COMPLEXITY", d.performance_file_complexity
        ),
    )
