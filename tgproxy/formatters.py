from typing import Any, Dict

from .constants import PUSH_EMOJI, UNKNOWN_AUTHOR

SHORT_SHA_LENGTH = 7


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _count(files: Any) -> int:
    return len(files) if isinstance(files, list) else 0


def _author_name(commit: Dict[str, Any]) -> str:
    name = _as_dict(commit.get('author')).get('name')
    return name if name is not None else UNKNOWN_AUTHOR


def format_commit_line(commit: Dict[str, Any]) -> str:
    short_id = str(commit.get('id') or '')[:SHORT_SHA_LENGTH]
    return (
        f"- {commit.get('message', '')} ([{short_id}]({commit.get('url', '')}))"
        f" by {_author_name(commit)}"
        f" (added: {_count(commit.get('added'))},"
        f" modified: {_count(commit.get('modified'))},"
        f" removed: {_count(commit.get('removed'))})"
    )


def format_push_message(event: Dict[str, Any]) -> str:
    """
    Monta o texto (Markdown do Telegram) de um push:
    cabeçalho com pusher e link do repositório, depois uma linha por commit.
    Campos aninhados com formato inesperado caem nos defaults.
    """
    pusher = _as_dict(event.get('pusher'))
    repository = _as_dict(event.get('repository'))
    commits = event.get('commits')
    if not isinstance(commits, list):
        commits = []

    header = (
        f"{PUSH_EMOJI} *{pusher.get('name', UNKNOWN_AUTHOR)}* pushed to "
        f"[{repository.get('name', '')}]({repository.get('html_url', '')}):"
    )
    lines = "\n".join(format_commit_line(c) for c in commits if isinstance(c, dict))
    return f"{header}\n{lines}"
