import json

from paperscore.dataframe.datapackage import (
    COPYRIGHT_AUTHORS,
    DataPackage,
    DataResource,
    FileResource,
    License,
)


class _CsvSource:
    def __init__(self, text):
        self.text = text
        self.headers = []

    def render_csv(self, stream, with_header):
        self.headers.append(with_header)
        stream.write(self.text)


def test_license_json():
    assert COPYRIGHT_AUTHORS.to_json() == {"name": "copyright-authors"}
    assert License("other").to_json() == {"name": "other"}


def test_metadata_lists_resources():
    dp = DataPackage(id="pkg", title="Softball data", licenses=[COPYRIGHT_AUTHORS])
    dp.add_resource(
        DataResource(path="games.csv", description="Game summary", data=_CsvSource("")),
        DataResource(path="events.csv", description="All events", data=_CsvSource("")),
    )
    meta = dp.metadata()
    assert meta["id"] == "pkg"
    assert meta["title"] == "Softball data"
    assert meta["licenses"] == [{"name": "copyright-authors"}]
    assert [r["path"] for r in meta["resources"]] == ["games.csv", "events.csv"]


def test_empty_metadata_is_null():
    meta = DataPackage().metadata()
    assert meta["licenses"] is None
    assert meta["resources"] is None


def test_data_resource_writes_with_header(tmp_path):
    source = _CsvSource("A,B\n1,2\n")
    resource = DataResource(path="x.csv", description="x", data=source)
    out = tmp_path / "x.csv"
    with open(out, "w", encoding="utf-8", newline="") as stream:
        resource.write_content(stream)
    assert source.headers == [True]
    assert out.read_text(encoding="utf-8") == source.text


def test_file_resource_copies(tmp_path):
    local = tmp_path / "local.txt"
    local.write_text("line one\nline two\n", encoding="utf-8")
    dp = DataPackage(id="files")
    dp.add_resource(FileResource(path="sub/copy.txt", description="copy", local_path=str(local)))
    dp.write(tmp_path / "out")
    assert (tmp_path / "out" / "sub" / "copy.txt").read_text(encoding="utf-8") == local.read_text(
        encoding="utf-8"
    )


def test_write_round_trip(tmp_path):
    source = _CsvSource("Name\nGeorge\n")
    dp = DataPackage(id="pkg", title="T", licenses=[COPYRIGHT_AUTHORS])
    dp.add_resource(DataResource(path="names.csv", description="Names", data=source))
    dp.write(tmp_path)
    text = (tmp_path / "dataset-metadata.json").read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert json.loads(text) == dp.metadata()
    assert (tmp_path / "names.csv").read_text(encoding="utf-8") == source.text