"""
End-to-end rendering tests

Tests the full pipeline: Markdown source → Renderer → HTML file, and the
command line stages built on top of it.
"""

import pytest
from argparse import Namespace
from pathlib import Path

from mdattrs.lib.renderer import Renderer, RenderError
from mdattrs.models import ProgramState, pipeline


SOURCE = """
# Getting started {#start .chapter}

Some introduction.

## Install {#install}

```bash {.console data-prompt="$"}
pip install mdattrs
```

## Plain section

```python
print("hi")
```
"""


class TestRenderer:
    """Test Renderer output"""

    def test_render_writes_document(self, tmp_path):
        """render() writes index.html and reports statistics"""
        renderer = Renderer(output_dir=str(tmp_path), verbosity=0, highlight=False)
        result = renderer.render(SOURCE, title="Guide")

        assert result['status'] is True
        assert result['heading_count'] == 3
        assert result['annotated_count'] == 3

        output_file = Path(result['output_file'])
        assert output_file == tmp_path / "index.html"
        html = output_file.read_text(encoding="utf-8")

        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Guide</title>" in html
        assert '<h1 id="start" class="chapter">Getting started</h1>' in html
        assert '<h2 id="install">Install</h2>' in html
        assert '<h2>Plain section</h2>' in html
        assert '<code class="console language-bash" data-prompt="$">' in html
        assert '<code class="language-python">' in html

    def test_render_highlighted(self, tmp_path):
        """With highlighting, code blocks carry the code class"""
        renderer = Renderer(output_dir=str(tmp_path), verbosity=0, highlight=True, style="default")
        html = renderer.html_render(renderer.tokens_parse(SOURCE))

        assert '<code class="console code" data-prompt="$">' in html
        assert '<pre><code class="code">' in html

    def test_title_escaped(self, tmp_path):
        """Document titles are HTML-escaped"""
        renderer = Renderer(output_dir=str(tmp_path), verbosity=0, highlight=False)
        html = renderer.htmlDocument_build("<p>x</p>\n", title="a<b")

        assert "<title>a&lt;b</title>" in html

    def test_output_dir_created(self, tmp_path):
        """Missing output directories are created"""
        target = tmp_path / "nested" / "out"
        renderer = Renderer(output_dir=str(target), verbosity=0, highlight=False)
        renderer.render("# T {#t}")

        assert (target / "index.html").exists()

    def test_unwritable_output(self, tmp_path):
        """Write failures raise RenderError"""
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        renderer = Renderer(output_dir=str(blocker), verbosity=0, highlight=False)

        with pytest.raises(RenderError, match="Cannot write"):
            renderer.render("# T")


class TestPipelineStages:
    """Test the command line pipeline stages"""

    def make_state(self, tmp_path, **options):
        inputdir = tmp_path / "in"
        inputdir.mkdir()
        (inputdir / "doc.md").write_text(SOURCE, encoding="utf-8")
        namespace = Namespace(
            inputFile="doc.md",
            outputSubdir="site",
            style=None,
            noHighlight=True,
            verbosity=0,
            **options,
        )
        return ProgramState.state_createFromNamespace(
            options=namespace, inputdir=inputdir, outputdir=tmp_path / "out"
        )

    def test_state_from_namespace(self, tmp_path):
        """Unknown options are dropped, known ones copied"""
        state = self.make_state(tmp_path, unrelated="x")

        assert state.inputFile == "doc.md"
        assert state.noHighlight is True
        assert not hasattr(state, "unrelated")

    def test_full_pipeline(self, tmp_path):
        """All stages run and write the page"""
        from mdattrs.__main__ import env_check, source_parse, html_render, results_report

        state = pipeline(
            self.make_state(tmp_path),
            env_check,
            source_parse,
            html_render,
            results_report,
        )

        assert state.envOK is True
        assert state.parseEnv["attrs_annotated"] == 3
        output_file = Path(state.renderResult['output_file'])
        assert output_file == tmp_path / "out" / "site" / "index.html"
        assert '<h1 id="start" class="chapter">' in output_file.read_text(encoding="utf-8")

    def test_renderer_built_once(self, tmp_path):
        """env_check builds the renderer, later stages reuse that instance"""
        from mdattrs.__main__ import env_check, source_parse, html_render

        checked = env_check(self.make_state(tmp_path))
        renderer = checked.renderer

        assert isinstance(renderer, Renderer)
        assert renderer.highlight is False
        assert renderer.output_dir == tmp_path / "out" / "site"

        rendered = html_render(source_parse(checked))
        assert rendered.renderer is renderer

    def test_missing_input_exits(self, tmp_path):
        """A missing input file stops the pipeline"""
        from mdattrs.__main__ import env_check

        state = self.make_state(tmp_path)
        state.inputFile = "missing.md"

        with pytest.raises(SystemExit) as excinfo:
            env_check(state)
        assert excinfo.value.code == 1
