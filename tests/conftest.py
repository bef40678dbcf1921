import pytest
from pathlib import Path
from video_catalog.metadata.probe import MetadataProbe, ProbeResult
from video_catalog.models import VideoRecord


class FakeProbe(MetadataProbe):
    """Answers from a {file name: ProbeResult} table instead of running ffprobe."""

    def __init__(self, results=None):
        super().__init__(ffprobe_bin="ffprobe-not-used")
        self.results = results or {}
        self.calls = []

    def probe(self, path):
        self.calls.append(Path(path).name)
        return self.results.get(Path(path).name, ProbeResult())


@pytest.fixture
def probe_factory():
    return FakeProbe


@pytest.fixture
def library(tmp_path):
    """
    A small movie library:
      Heat (1995)/Heat.1995.1080p.mkv
      Heat (1995)/notes.txt
      Alien (1979)/Alien.2160p.mp4
      Dune (2021)/Dune.720p.MKV
      Home Videos/birthday.avi
    """
    root = tmp_path / "movies"
    layout = {
        "Heat (1995)": ["Heat.1995.1080p.mkv", "notes.txt"],
        "Alien (1979)": ["Alien.2160p.mp4"],
        "Dune (2021)": ["Dune.720p.MKV"],
        "Home Videos": ["birthday.avi"],
    }
    for folder, files in layout.items():
        d = root / folder
        d.mkdir(parents=True)
        for name in files:
            (d / name).write_bytes(b"x" * 1024)
    return root


def make_record(**overrides) -> VideoRecord:
    fields = dict(
        path=Path("/movies/Heat (1995)/Heat.1080p.mkv"),
        title="Heat",
        year="1995",
        decade="1990s",
        resolution="1920x1080",
        aspect_ratio="1.78",
        quality="1080p",
        file_size_gb="1.50",
        duration="02:50:00",
        audio_language="eng",
    )
    fields.update(overrides)
    return VideoRecord(**fields)


@pytest.fixture
def record_factory():
    return make_record
