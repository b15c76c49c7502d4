import pytest

from openapi_to_ts.pipeline.ast_backends import Field, File, Interface, Project, TypeScriptSerializer, Union, relative_path


@pytest.fixture
def serializer():
    return TypeScriptSerializer()


class TestRelativePath:
    @pytest.mark.parametrize(
        "from_path,to_path,expected",
        [
            ("core/v1.ts", "core/v1beta1.ts", "./v1beta1.ts"),
            ("batch/v1.ts", "meta/v1.ts", "../meta/v1.ts"),
            ("batch/v1.ts", "api/resource.ts", "../api/resource.ts"),
            ("a/b/c.ts", "meta/v1.ts", "../../meta/v1.ts"),
            ("a/b/c.ts", "a/b/d.ts", "./d.ts"),
            ("runtime.ts", "version.ts", "./version.ts"),
            ("runtime.ts", "meta/v1.ts", "./meta/v1.ts"),
        ],
    )
    def test_relative_path(self, from_path, to_path, expected):
        assert relative_path(from_path, to_path) == expected


class TestFile:
    def test_no_self_import(self):
        file = File(path="core/v1.ts")
        file.import_("core/v1.ts", "Pod")
        assert file.imports == {}

    def test_import_deduplicates(self):
        file = File(path="apps/v1.ts")
        file.import_("core/v1.ts", "Pod").import_("core/v1.ts", "Pod").import_("core/v1.ts", "Container")
        assert file.imports == {"core/v1.ts": {"Pod", "Container"}}

    def test_project_creates_files_lazily(self):
        project = Project()
        assert len(project) == 0
        first = project.file("core/v1.ts")
        assert project.file("core/v1.ts") is first
        project.file("apps/v1.ts")
        assert [f.path for f in project.all()] == ["apps/v1.ts", "core/v1.ts"]


class TestTypeScriptSerializer:
    """Test rendering of files to TypeScript source lines"""

    def test_empty_file(self, serializer):
        assert serializer.render(File(path="core/v1.ts")) == []
        assert serializer.render_text(File(path="core/v1.ts")) == ""

    def test_union(self, serializer):
        file = File(path="meta/v1.ts").add(Union(name="Time", description="Time is a timestamp.", types=["string"]))
        assert serializer.render(file) == [
            "/**",
            " * Time is a timestamp.",
            " */",
            "export type Time = string",
        ]

    def test_interface_fields(self, serializer):
        interface = Interface(name="Widget", description=None)
        interface.add(Field(name="size", type="number"))
        interface.add(Field(name="tags", type="Array<string>", optional=True))
        interface.add(Field(name="x-name", type="string", optional=True))
        interface.add(Field(name="$ref", type="string", optional=True))
        file = File(path="group.ts").add(interface)
        assert serializer.render(file) == [
            "export interface Widget {",
            "  size: number",
            "  tags?: Array<string>",
            '  "x-name"?: string',
            '  "$ref"?: string',
            "}",
        ]

    def test_blank_line_before_multiline_members_only(self, serializer):
        interface = Interface(name="Job", description="A job.")
        interface.add(Field(name="a", type="string"))
        interface.add(Field(name="b", description="B.", type="string"))
        interface.add(Field(name="c", type="string"))
        interface.add(Field(name="d", description="D.", type="string"))
        file = File(path="batch/v1.ts").add(interface).add(Union(name="Alias", description=None, types=["number"]))
        assert serializer.render(file) == [
            "export type Alias = number",
            "",
            "/**",
            " * A job.",
            " */",
            "export interface Job {",
            "  a: string",
            "",
            "  /**",
            "   * B.",
            "   */",
            "  b: string",
            "  c: string",
            "",
            "  /**",
            "   * D.",
            "   */",
            "  d: string",
            "}",
        ]

    def test_description_reflow(self, serializer):
        union = Union(name="Quantity", description="First line.   \n\nSecond line. Required.", types=["string"])
        assert serializer.render(File(path="api/resource.ts").add(union)) == [
            "/**",
            " * First line.",
            " * ",
            " * Second line.",
            " */",
            "export type Quantity = string",
        ]

    def test_required_marker_variants(self, serializer):
        for description in ["Name. Required", "Name.\nRequired.", "Name. Required.  "]:
            lines = serializer.render(File(path="a/b.ts").add(Union(name="N", description=description, types=["string"])))
            assert lines[1] == " * Name."

    def test_imports_sorted_by_relative_path_then_names(self, serializer):
        file = File(path="apps/v1.ts")
        file.import_("meta/v1.ts", "ObjectMeta")
        file.import_("core/v1.ts", "Volume")
        file.import_("apps/v1beta1.ts", "Legacy")
        file.import_("core/v1.ts", "Container")
        file.import_("meta/v1.ts", "LabelSelector")
        file.add(Union(name="Strategy", description=None, types=["string"]))
        assert serializer.render(file) == [
            'import {Container, Volume} from "../core/v1.ts"',
            'import {LabelSelector, ObjectMeta} from "../meta/v1.ts"',
            'import {Legacy} from "./v1beta1.ts"',
            "",
            "export type Strategy = string",
        ]

    def test_declarations_sorted_regardless_of_insertion_order(self, serializer):
        decls = [Union(name=name, description=None, types=["string"]) for name in ["Zeta", "Alpha", "Mid"]]
        forward = File(path="x/v1.ts")
        backward = File(path="x/v1.ts")
        for decl in decls:
            forward.add(decl)
        for decl in reversed(decls):
            backward.add(decl)
        assert serializer.render(forward) == serializer.render(backward)
        assert serializer.render(forward) == [
            "export type Alpha = string",
            "export type Mid = string",
            "export type Zeta = string",
        ]

    def test_file_render_matches_serializer(self, serializer):
        file = File(path="meta/v1.ts").add(Union(name="Time", description=None, types=["string"]))
        assert file.render() == serializer.render(file)


if __name__ == "__main__":
    pytest.main([__file__])
