#!/usr/bin/env python3
"""
Integration tests driving the FastAPI application end to end.
"""

import shutil

import pytest
from fastapi.testclient import TestClient

from ubergallery.config import Settings
from ubergallery.exceptions import ConfigurationError
from ubergallery.main import create_app
from ubergallery.models import ThumbnailCacheStatsResponse

BASE_CONFIG = """
[basic_settings]
cache_expiration    = {cache_expiration}
enable_pagination   = {enable_pagination}
paginator_threshold = 0
thumbnail_width     = 100
thumbnail_height    = 100
thumbnail_quality   = 75
theme_name          = {theme_name}

[advanced_settings]
images_per_page  = 2
images_sort_by   = name
reverse_sort     = false
enable_debugging = false
"""


@pytest.fixture
def write_config(tmp_path):
    def _write(cache_expiration=0, enable_pagination="false", theme_name="default"):
        path = tmp_path / "galleryConfig.ini"
        path.write_text(
            BASE_CONFIG.format(
                cache_expiration=cache_expiration,
                enable_pagination=enable_pagination,
                theme_name=theme_name,
            ),
            encoding="utf-8",
        )
        return path

    return _write


@pytest.fixture
def make_client(public_root, write_config):
    clients = []

    def _make(**config_values):
        app_settings = Settings(
            public_directory=str(public_root),
            config_file=str(write_config(**config_values)),
        )
        client = TestClient(create_app(app_settings))
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.mark.integration
class TestGalleryIndex:
    def test_index_lists_images_with_thumbnails(self, make_client, add_image, cache_dir):
        add_image("a.jpg")
        add_image("b.jpg")

        response = make_client().get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert 'src="/public/cache/100x100-a.jpg"' in response.text
        assert 'href="/public/gallery-images/b.jpg"' in response.text
        assert (cache_dir / "100x100-a.jpg").is_file()
        assert (cache_dir / "100x100-b.jpg").is_file()

    def test_undecodable_image_is_still_listed(self, make_client, gallery_dir):
        (gallery_dir / "broken.jpg").write_bytes(b"not an image")

        response = make_client().get("/")

        assert response.status_code == 200
        assert 'src="/public/gallery-images/broken.jpg"' in response.text

    def test_pagination_links(self, make_client, add_image):
        for i in range(3):
            add_image(f"img{i}.jpg", size=(20, 20))

        response = make_client(enable_pagination="true").get("/", params={"page": 2})

        assert "img2.jpg" in response.text
        assert "img0.jpg" not in response.text
        assert "Page 2 of 2" in response.text

    def test_unreadable_gallery_directory_renders_error_page(
        self, make_client, gallery_dir
    ):
        client = make_client()
        shutil.rmtree(gallery_dir)

        response = client.get("/")

        assert response.status_code == 500
        assert "Internal error" in response.text


@pytest.mark.integration
class TestGalleryApi:
    def test_images_endpoint_returns_listing(self, make_client, add_image):
        add_image("a.jpg")

        response = make_client().get("/api/images")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["images"] == [
            {
                "name": "a.jpg",
                "thumbnail": "/public/cache/100x100-a.jpg",
                "url": "/public/gallery-images/a.jpg",
            }
        ]

    def test_images_endpoint_reports_unreadable_directory(
        self, make_client, gallery_dir
    ):
        client = make_client()
        shutil.rmtree(gallery_dir)

        response = client.get("/api/images")

        assert response.status_code == 500

    def test_thumbnail_stats(self, make_client, add_image):
        add_image("a.jpg")
        client = make_client()

        client.get("/api/images")
        client.get("/api/images")
        stats = client.get("/api/thumbnails/stats").json()

        assert stats["generated"] == 1
        assert stats["hits"] == 1
        assert stats["fallbacks"]["generation_failed"] == 0

    def test_health(self, make_client):
        assert make_client().get("/health").json()["status"] == "healthy"


@pytest.mark.integration
class TestPublicFiles:
    def test_thumbnail_is_served(self, make_client, add_image):
        add_image("a.jpg")
        client = make_client()
        client.get("/")

        response = client.get("/public/cache/100x100-a.jpg")

        assert response.status_code == 200
        assert response.headers["content-type"] == "image/jpeg"
        assert "cache-control" not in response.headers

    def test_cache_expiration_sets_max_age(self, make_client, add_image):
        add_image("a.jpg")

        response = make_client(cache_expiration=60).get("/public/gallery-images/a.jpg")

        assert response.status_code == 200
        assert response.headers["cache-control"] == "public, max-age=60"


@pytest.mark.integration
class TestStartup:
    def test_missing_config_file_aborts_startup(self, public_root, tmp_path):
        app = create_app(
            Settings(
                public_directory=str(public_root),
                config_file=str(tmp_path / "missing.ini"),
            )
        )

        with pytest.raises(ConfigurationError):
            with TestClient(app):
                pass

    def test_unknown_theme_aborts_startup(self, make_client):
        with pytest.raises(ConfigurationError):
            make_client(theme_name="no-such-theme")

    def test_startup_creates_cache_directory(self, make_client, cache_dir):
        make_client()

        assert cache_dir.is_dir()


@pytest.mark.integration
class TestErrorHandling:
    def test_unhandled_error_returns_json_envelope(self, public_root, write_config):
        app = create_app(
            Settings(
                public_directory=str(public_root),
                config_file=str(write_config()),
                environment="production",
            )
        )

        @app.get("/boom")
        async def boom():
            raise RuntimeError("kaboom")

        with TestClient(app) as client:
            response = client.get("/boom")

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["type"] == "internal_error"
        assert "correlation_id" in error
        assert "traceback" not in error

    def test_model_validation_error_in_handler_is_internal_error(
        self, public_root, write_config
    ):
        app = create_app(
            Settings(
                public_directory=str(public_root),
                config_file=str(write_config()),
                environment="production",
            )
        )

        @app.get("/bad-model")
        async def bad_model():
            return ThumbnailCacheStatsResponse(
                hits="many", misses=0, generated=0, fallbacks={}
            )

        with TestClient(app) as client:
            response = client.get("/bad-model")

        assert response.status_code == 500
        assert response.json()["error"]["type"] == "internal_error"
