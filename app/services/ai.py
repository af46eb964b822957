"""AI service: relays one file to an OpenAI-compatible model for optimization."""

from deps import (
    APIConnectionError,
    APIError,
    APITimeoutError,
    Any,
    AuthenticationError,
    Dict,
    List,
    OpenAI,
    Optional,
    RateLimitError,
    json,
    logging,
    re,
)

from skript_analyzer.utils import detect_language, is_skript

from ..config import (
    get_ai_api_key,
    get_ai_base_url,
    get_ai_max_tokens,
    get_ai_model,
    get_ai_temperature,
    get_ai_timeout,
)
from ..schemas import OptimizeOptions

logger = logging.getLogger(__name__)

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


class AIServiceError(Exception):
    """The AI backend could not produce a result."""

    status_code = 502


class AIUnavailableError(AIServiceError):
    """No API key is configured."""

    status_code = 503


def _client() -> Optional[OpenAI]:
    """Return OpenAI-compatible client, or None if no key is configured."""
    key = get_ai_api_key()
    if not key:
        return None
    return OpenAI(api_key=key, base_url=get_ai_base_url(), timeout=get_ai_timeout())


# Rules that keep the model from rewriting Skript into another language.
SKRIPT_GUARD_INSTRUCTIONS = (
    "- This is a SKRIPT file for a Minecraft server.\n"
    "- Do NOT convert the syntax to JavaScript, Java, Python or any other language.\n"
    "- KEEP the original Skript syntax (on, command, set, if, else, loop, ...).\n"
    "- Do NOT use arrow functions, const/let, or other modern JS syntax.\n"
    "- Do NOT add semicolons at the end of lines.\n"
    "- KEEP the original tab/space indentation.\n"
)


def build_prompt(file_name: str, content: str, options: OptimizeOptions) -> str:
    """Optimization prompt for one file, asking for a JSON reply."""
    skript = is_skript(file_name, content)
    language = "Skript (Minecraft plugin language)" if skript else detect_language(file_name)
    prompt = (
        "You are an expert developer who will analyze and fix the following plugin script.\n\n"
        f"FILE: {file_name}\n"
        f"DETECTED LANGUAGE: {language}\n"
        f"CONTENT:\n```\n{content}\n```\n\n"
        "CRITICAL WARNING:\n"
    )
    if skript:
        prompt += SKRIPT_GUARD_INSTRUCTIONS
    else:
        prompt += (
            "- Detect the programming language correctly.\n"
            "- Use the syntax of that language and do not switch to another one.\n"
        )

    tasks: List[str] = []
    if options.fix_syntax:
        if skript:
            tasks.append(
                "Fix SKRIPT syntax errors (not JavaScript): wrong conditions (is, is not, contains), "
                "broken loops, invalid expressions; variables must use {_variable} or {variable}."
            )
        else:
            tasks.append("Fix syntax errors for the language in use.")
    if options.optimize_code:
        if skript:
            tasks.append(
                "Optimize the Skript code: remove redundancy, fix inefficient loops, "
                "use wait/delay carefully, and keep the original Skript syntax."
            )
        else:
            tasks.append("Improve performance by removing redundancy.")
    if options.add_comments:
        tasks.append("Add clear comments (# for Skript, or the language's own syntax).")
    if options.modernize and not skript:
        tasks.append("Modernize the code.")
    if options.security_check:
        tasks.append("Audit security: identify vulnerabilities.")
    if options.best_practices:
        if skript:
            tasks.append(
                "Apply Skript best practices: proper event handling, efficient variable usage, "
                "clear command structure."
            )
        else:
            tasks.append("Apply the language's best practices.")

    prompt += "\nTASKS:\n"
    prompt += "".join(f"{n}. {task}\n" for n, task in enumerate(tasks, 1))
    prompt += (
        "\nCRITICAL REQUIREMENTS:\n"
        + ("- The output MUST remain valid Skript syntax, NOT JavaScript/Java.\n" if skript else "")
        + "- The code must be 100% valid with no syntax errors.\n"
        "- Do NOT change the programming language.\n"
        "- Keep existing functionality.\n"
        "- If unsure about a change, do not make it.\n\n"
        "RESPONSE FORMAT:\n"
        "Reply with JSON in this shape:\n"
        "{\n"
        '  "optimizedCode": "the fixed code (SAME LANGUAGE)",\n'
        '  "changes": ["changes made"],\n'
        '  "issues": ["issues found and fixed"],\n'
        '  "suggestions": ["further suggestions"],\n'
        f'  "language": "{"Skript" if skript else "auto-detect"}"\n'
        "}"
    )
    return prompt


def _as_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, list):
        return [str(v) for v in value]
    return [str(value)]


def parse_response(text: str, language: str = "auto-detect") -> Dict[str, Any]:
    """Pull the JSON object out of a model reply, falling back to the raw text as code."""
    match = _JSON_OBJECT.search(text)
    if not match:
        return {
            "optimized_code": text,
            "changes": ["Code optimized"],
            "issues": [],
            "suggestions": [],
            "language": language,
        }
    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        logger.warning("Could not parse AI response as JSON: %s", e)
        return {
            "optimized_code": text,
            "changes": ["Response received"],
            "issues": [],
            "suggestions": [],
            "language": language,
        }
    if not isinstance(data, dict):
        data = {}
    return {
        "optimized_code": str(data.get("optimizedCode", text)),
        "changes": _as_list(data.get("changes")),
        "issues": _as_list(data.get("issues")),
        "suggestions": _as_list(data.get("suggestions")),
        "language": str(data.get("language", language)),
    }


class AIService:
    """OpenAI-compatible backend for whole-file optimization."""

    def is_available(self) -> bool:
        return bool(get_ai_api_key())

    def optimize(self, file_name: str, content: str, options: OptimizeOptions) -> Dict[str, Any]:
        """Return parsed optimization result. Raises AIServiceError on failure."""
        client = _client()
        if client is None:
            raise AIUnavailableError("AI_API_KEY is not configured")
        prompt = build_prompt(file_name, content, options)
        language = "Skript" if is_skript(file_name, content) else detect_language(file_name)
        try:
            r = client.chat.completions.create(
                model=get_ai_model(),
                messages=[{"role": "user", "content": prompt}],
                max_tokens=get_ai_max_tokens(),
                temperature=get_ai_temperature(),
            )
        except AuthenticationError as e:
            raise AIServiceError("API key rejected. Check AI_API_KEY.") from e
        except RateLimitError as e:
            raise AIServiceError("Rate limit reached. Wait a moment and try again.") from e
        except APITimeoutError as e:
            raise AIServiceError("Request timed out. The file may be too large or the connection slow.") from e
        except APIConnectionError as e:
            raise AIServiceError(f"Could not reach the AI backend: {e}") from e
        except APIError as e:
            raise AIServiceError(f"AI backend error: {e}") from e

        text = ""
        if r.choices and r.choices[0].message.content:
            text = r.choices[0].message.content.strip()
        if not text:
            raise AIServiceError(f"Empty response while optimizing {file_name}")
        logger.info("Optimized %s with %s", file_name, get_ai_model())
        return parse_response(text, language)
