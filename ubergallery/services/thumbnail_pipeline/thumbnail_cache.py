# ubergallery/services/thumbnail_pipeline/thumbnail_cache.py
"""
On-demand thumbnail cache.

Thumbnails are generated the first time a (width, height, filename) key is
resolved and stored as ``{width}x{height}-{filename}`` in the cache
directory. Later resolutions return the stored artifact without touching the
source image.

Failure policy: ``resolve`` never raises. Any failure (bad filename, source
unreadable, decode/encode failure, write failure) returns the source image's
own path instead. Nothing about the failure is persisted, so the next
resolution of the same key retries generation from scratch.

Concurrency: resolutions of the same key are serialized by a per-key lock and
re-check the artifact after acquiring it, so one caller generates and the rest
reuse its result. Different keys never share a lock. Artifacts are written to
a temp file and renamed into place, so a partial artifact is never visible.
"""

import asyncio
import re
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Dict, Iterator, Optional

from ...constants import ARTIFACT_NAME_PATTERN, ARTIFACT_NAME_TEMPLATE
from ...enums import LogEmoji, LoggerName, LogSource, ThumbnailFallbackReason
from ...exceptions import (
    GenerationError,
    PersistFailedError,
    SourceUnreadableError,
)
from ...services.logger import get_service_logger
from ...utils.file_helpers import atomic_write_bytes, is_plain_filename
from .generators.thumbnail_generator import ThumbnailGenerator

logger = get_service_logger(
    LoggerName.THUMBNAIL_PIPELINE, LogSource.PIPELINE, default_emoji=LogEmoji.THUMBNAIL
)

_ARTIFACT_NAME_RE = re.compile(ARTIFACT_NAME_PATTERN)


@dataclass(frozen=True)
class CacheKey:
    """Identity of one cached thumbnail."""

    width: int
    height: int
    filename: str

    @property
    def artifact_name(self) -> str:
        return ARTIFACT_NAME_TEMPLATE.format(
            width=self.width, height=self.height, filename=self.filename
        )

    @classmethod
    def from_artifact_name(cls, name: str) -> Optional["CacheKey"]:
        """Recover the key from an artifact file name, or None if it is not one."""
        match = _ARTIFACT_NAME_RE.match(name)
        if match is None:
            return None
        return cls(
            width=int(match.group("width")),
            height=int(match.group("height")),
            filename=match.group("filename"),
        )


class ThumbnailCacheStats:
    """Thread-safe counters describing cache activity since startup."""

    def __init__(self):
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0
        self.generated = 0
        self.fallbacks: Dict[ThumbnailFallbackReason, int] = {
            reason: 0 for reason in ThumbnailFallbackReason
        }

    def record_hit(self) -> None:
        with self._lock:
            self.hits += 1

    def record_miss(self) -> None:
        with self._lock:
            self.misses += 1

    def record_generated(self) -> None:
        with self._lock:
            self.generated += 1

    def record_fallback(self, reason: ThumbnailFallbackReason) -> None:
        with self._lock:
            self.fallbacks[reason] += 1

    def snapshot(self) -> Dict[str, object]:
        with self._lock:
            return {
                "hits": self.hits,
                "misses": self.misses,
                "generated": self.generated,
                "fallbacks": {
                    reason.value: count for reason, count in self.fallbacks.items()
                },
            }


class _KeyLock:
    __slots__ = ("lock", "holders")

    def __init__(self):
        self.lock = threading.Lock()
        self.holders = 0


class ThumbnailCache:
    """Resolves source image names to cached thumbnail paths."""

    def __init__(
        self,
        gallery_directory: Path,
        cache_directory: Path,
        generator: Optional[ThumbnailGenerator] = None,
    ):
        """
        Args:
            gallery_directory: Directory containing the source images
            cache_directory: Directory receiving thumbnail artifacts
            generator: Thumbnail generator (defaults to a JPEG ThumbnailGenerator)
        """
        self.gallery_directory = Path(gallery_directory)
        self.cache_directory = Path(cache_directory)
        self.generator = generator or ThumbnailGenerator()
        self.stats = ThumbnailCacheStats()

        self._key_locks: Dict[CacheKey, _KeyLock] = {}
        self._key_locks_guard = threading.Lock()

    def source_path(self, filename: str) -> Path:
        return self.gallery_directory / filename

    def artifact_path(self, filename: str, width: int, height: int) -> Path:
        return self.cache_directory / CacheKey(width, height, filename).artifact_name

    def resolve(self, filename: str, width: int, height: int, quality: int) -> Path:
        """
        Return the thumbnail path for a source image, generating it if needed.

        Args:
            filename: Source image file name inside the gallery directory
            width: Maximum thumbnail width
            height: Maximum thumbnail height
            quality: JPEG quality for newly generated thumbnails

        Returns:
            Path of the thumbnail artifact, or of the source image on any failure
        """
        if not is_plain_filename(filename):
            logger.warning(
                f"Refusing to create thumbnail for unsafe file name {filename!r}",
                emoji=LogEmoji.SECURITY,
                extra_context={"operation": "thumbnail_resolve", "filename": filename},
            )
            return self._fallback(filename, ThumbnailFallbackReason.INVALID_FILENAME)

        key = CacheKey(width, height, filename)
        artifact = self.cache_directory / key.artifact_name

        if artifact.is_file():
            self.stats.record_hit()
            return artifact

        with self._lock_for(key):
            # Another resolver may have finished while this one waited
            if artifact.is_file():
                self.stats.record_hit()
                return artifact

            self.stats.record_miss()
            try:
                data = self._generate(key, quality)
            except SourceUnreadableError as e:
                self._log_failure(key, e)
                return self._fallback(filename, ThumbnailFallbackReason.SOURCE_UNREADABLE)
            except GenerationError as e:
                self._log_failure(key, e)
                return self._fallback(filename, ThumbnailFallbackReason.GENERATION_FAILED)
            except Exception as e:
                logger.error(
                    f"Unexpected error creating thumbnail for {filename}",
                    exception=e,
                    error_context={"operation": "thumbnail_generate", "filename": filename},
                )
                return self._fallback(filename, ThumbnailFallbackReason.GENERATION_FAILED)

            try:
                self._persist(artifact, data)
            except PersistFailedError as e:
                self._log_failure(key, e)
                return self._fallback(filename, ThumbnailFallbackReason.PERSIST_FAILED)

        self.stats.record_generated()
        logger.info(
            f"Created thumbnail {artifact.name}",
            extra_context={
                "operation": "thumbnail_generate",
                "filename": filename,
                "artifact": str(artifact),
                "bytes": len(data),
            },
        )
        return artifact

    async def resolve_async(
        self, filename: str, width: int, height: int, quality: int
    ) -> Path:
        """Run ``resolve`` in the default executor so decoding never blocks the loop."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, partial(self.resolve, filename, width, height, quality)
        )

    def _generate(self, key: CacheKey, quality: int) -> bytes:
        source = self.source_path(key.filename)
        try:
            source_bytes = source.read_bytes()
        except OSError as e:
            raise SourceUnreadableError(f"Cannot read {source}: {e}") from e

        return self.generator.generate(source_bytes, key.width, key.height, quality)

    def _persist(self, artifact: Path, data: bytes) -> None:
        try:
            atomic_write_bytes(artifact, data)
        except OSError as e:
            raise PersistFailedError(f"Cannot write {artifact}: {e}") from e

    def _fallback(self, filename: str, reason: ThumbnailFallbackReason) -> Path:
        self.stats.record_fallback(reason)
        return self.source_path(filename)

    def _log_failure(self, key: CacheKey, error: Exception) -> None:
        logger.warning(
            f"Could not create thumbnail for {key.filename}: {error}",
            emoji=LogEmoji.WARNING,
            extra_context={
                "operation": "thumbnail_generate",
                "filename": key.filename,
                "width": key.width,
                "height": key.height,
                "error_type": type(error).__name__,
            },
        )

    @contextmanager
    def _lock_for(self, key: CacheKey) -> Iterator[None]:
        with self._key_locks_guard:
            entry = self._key_locks.get(key)
            if entry is None:
                entry = self._key_locks[key] = _KeyLock()
            entry.holders += 1

        try:
            with entry.lock:
                yield
        finally:
            with self._key_locks_guard:
                entry.holders -= 1
                if entry.holders == 0:
                    del self._key_locks[key]
