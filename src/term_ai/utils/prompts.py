from term_ai.models.message import Message

SYSTEM_CONSTRAINTS = """You are an expert macOS terminal and development environment engineer.

Constraints:
- Respond ONLY with valid shell commands, one per line.
- Do not include explanations, comments, Markdown, or prose.
- Prefer Homebrew for package installation where appropriate.
- Avoid destructive operations (no rm -rf, no disk formatting, no sudo unless clearly necessary and safe)."""

WEB_SEARCH_INSTRUCTIONS = "When you need current information (latest versions, recent releases, current documentation), use the web_search tool to find up-to-date information before responding."

SYSTEM_MESSAGE_TOOLS = f"{SYSTEM_CONSTRAINTS}\n\n{WEB_SEARCH_INSTRUCTIONS}"


def build_prompt(user_request: str) -> str:
    """Build the single-shot prompt used when web search is disabled."""
    return f"{SYSTEM_CONSTRAINTS}\n\nUser request:\n{user_request}"


def build_initial_messages(user_request: str) -> list[Message]:
    """Build the opening [system, user] conversation for tool-calling mode."""
    return [
        Message(role="system", content=SYSTEM_MESSAGE_TOOLS),
        Message(role="user", content=user_request),
    ]
