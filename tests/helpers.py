"""Shared builders for vsdown tests."""

import io
import tarfile
from collections.abc import AsyncGenerator
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import orjson


async def async_chunk_gen(
    chunks: list[bytes],
) -> AsyncGenerator[bytes, None]:
    """Async generator yielding chunks for simulating HTTP responses."""
    for chunk in chunks:
        yield chunk


def make_response(
    status: int = 200,
    body: bytes = b"",
    chunks: list[bytes] | None = None,
    content_length: int | None = None,
) -> AsyncMock:
    """Build a mock aiohttp response usable with ``async with``."""
    response = AsyncMock()
    response.__aenter__.return_value = response
    response.__aexit__.return_value = None
    response.status = status
    response.read = AsyncMock(return_value=body)
    response.content_length = content_length
    response.content = MagicMock()
    response.content.iter_chunked = lambda size: async_chunk_gen(
        chunks if chunks is not None else [body]
    )
    return response


def make_json_response(payload: object, status: int = 200) -> AsyncMock:
    """Build a mock response whose body is ``payload`` as JSON."""
    return make_response(status=status, body=orjson.dumps(payload))


def make_archive(
    top: str = "VSCode-linux-x64",
    files: dict[str, bytes] | None = None,
    modes: dict[str, int] | None = None,
) -> bytes:
    """Build a gzip tarball shaped like a VS Code release.

    Files default to mode 0o755; ``modes`` overrides it per name.
    """
    modes = modes or {}
    if files is None:
        files = {
            "code": b"#!/bin/sh\necho code\n",
            "resources/app/package.json": b'{"version": "1.95.0"}',
        }

    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as tar:
        top_info = tarfile.TarInfo(top)
        top_info.type = tarfile.DIRTYPE
        top_info.mode = 0o755
        tar.addfile(top_info)
        for name, data in files.items():
            info = tarfile.TarInfo(f"{top}/{name}")
            info.size = len(data)
            info.mode = modes.get(name, 0o755)
            tar.addfile(info, io.BytesIO(data))
    return buffer.getvalue()


def snapshot(root: Path) -> dict[str, bytes | str | None]:
    """Map every path under ``root`` to its content or link target."""
    state: dict[str, bytes | str | None] = {}
    for path in sorted(root.rglob("*")):
        key = str(path.relative_to(root))
        if path.is_symlink():
            state[key] = f"-> {path.readlink()}"
        elif path.is_file():
            state[key] = path.read_bytes()
        else:
            state[key] = None
    return state


class InMemoryVersionStore:
    """VersionStore fake that never touches the filesystem."""

    def __init__(self, content: str | None = None) -> None:
        self.content = content
        self.writes: list[str] = []

    def read(self) -> str | None:
        return self.content

    def write(self, version: str) -> None:
        self.content = version
        self.writes.append(version)

    def delete(self) -> bool:
        existed = self.content is not None
        self.content = None
        return existed
