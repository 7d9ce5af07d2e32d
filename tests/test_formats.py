import pytest

from inilayer import FileIOError, IniConfig, IniJsonParser, IniYamlParser, InvalidDocument


@pytest.fixture
def conf():
    return (
        IniConfig()
        .set_default("var1", "val1")
        .set("Group A", "var 3", "value = three")
        .set("组", "名", "值")
    )


@pytest.mark.parametrize("handler, suffix", [(IniYamlParser, ".yaml"), (IniJsonParser, ".json")])
class TestDocumentParsers:
    def test_write_then_read(self, conf, tmp_path, handler, suffix):
        path = tmp_path / f"conf{suffix}"
        handler(path).write(conf)
        assert handler(path).read() == conf

    def test_missing_file(self, tmp_path, handler, suffix):
        with pytest.raises(FileIOError):
            handler(tmp_path / f"missing{suffix}").read()


class TestYaml:
    def test_scalars_become_strings(self, tmp_path):
        path = tmp_path / "conf.yaml"
        path.write_text("Server:\n  port: 8080\n  debug: true\n", encoding="utf-8")
        conf = IniYamlParser(path).read()
        assert conf[("Server", "port")] == "8080"
        assert conf[("Server", "debug")] == "True"

    def test_null_value_is_empty(self, tmp_path):
        path = tmp_path / "conf.yaml"
        path.write_text("G:\n  a:\n  b: ~\n", encoding="utf-8")
        conf = IniYamlParser(path).read()
        assert conf[("G", "a")] == ""
        assert conf[("G", "b")] == ""

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "conf.yaml"
        path.write_bytes(b"G:\n  a: \xff\xff\n")
        with pytest.raises(FileIOError) as excinfo:
            IniYamlParser(path).read()
        assert excinfo.value.kind == "UnicodeDecodeError"

    def test_empty_document(self, tmp_path):
        path = tmp_path / "conf.yaml"
        path.write_text("", encoding="utf-8")
        assert len(IniYamlParser(path).read()) == 0

    def test_list_document_rejected(self, tmp_path):
        path = tmp_path / "conf.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(InvalidDocument, match="mapping of groups"):
            IniYamlParser(path).read()

    def test_nested_groups_rejected(self, tmp_path):
        path = tmp_path / "conf.yaml"
        path.write_text("A:\n  B:\n    c: d\n", encoding="utf-8")
        with pytest.raises(InvalidDocument, match="nested groups"):
            IniYamlParser(path).read()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "conf.yaml"
        path.write_text("A: [\n", encoding="utf-8")
        with pytest.raises(InvalidDocument, match="invalid YAML"):
            IniYamlParser(path).read()


class TestJson:
    def test_null_value_is_empty(self, tmp_path):
        path = tmp_path / "conf.json"
        path.write_text('{"G": {"a": null}}', encoding="utf-8")
        assert IniJsonParser(path).read()[("G", "a")] == ""

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "conf.json"
        path.write_bytes(b'{"G": {"a": "\xff\xff"}}')
        with pytest.raises(FileIOError) as excinfo:
            IniJsonParser(path).read()
        assert excinfo.value.kind == "UnicodeDecodeError"

    def test_group_must_be_object(self, tmp_path):
        path = tmp_path / "conf.json"
        path.write_text('{"A": "not a group"}', encoding="utf-8")
        with pytest.raises(InvalidDocument, match="is not a mapping"):
            IniJsonParser(path).read()

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "conf.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(InvalidDocument, match="invalid JSON"):
            IniJsonParser(path).read()
