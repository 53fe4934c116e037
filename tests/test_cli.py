import json

import cv2
import fitz

from template_analyzer.cli import main

from conftest import build_pdf


def test_json_to_stdout(tmp_path, divider_png, capsys):
    path = tmp_path / "template.png"
    path.write_bytes(divider_png)

    assert main([str(path)]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["source_type"] == "image"
    assert output["dimensions"] == {"width": 800, "height": 1000, "aspect_ratio": 0.8}
    assert output["design_elements"]["horizontal_lines"][0]["y"] == 500
    assert output["theme"]["primary_color"] == "#f0f0f0"


def test_all_outputs_written(tmp_path, divider_png):
    path = tmp_path / "template.png"
    path.write_bytes(divider_png)
    json_path = tmp_path / "analysis.json"
    css_path = tmp_path / "theme.css"
    debug_path = tmp_path / "debug.png"

    code = main([
        str(path),
        "--output", str(json_path),
        "--css", str(css_path),
        "--debug-image", str(debug_path),
    ])

    assert code == 0
    assert json.loads(json_path.read_text())["layout"]["margins"]["top"] == 500
    assert "--resume-primary-color: #f0f0f0;" in css_path.read_text()
    assert cv2.imread(str(debug_path)).shape == (1000, 800, 3)


def test_pdf_with_mime_override(tmp_path, capsys):
    path = tmp_path / "template.bin"
    path.write_bytes(build_pdf("Jane Doe"))

    assert main([str(path), "--mime-type", "application/pdf"]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output["source_type"] == "pdf"
    assert output["fonts"]


def test_config_file_is_applied(tmp_path, divider_png, capsys):
    path = tmp_path / "template.png"
    path.write_bytes(divider_png)
    config = tmp_path / "analyzer.yaml"
    config.write_text("analyzer:\n  palette_size: 1\n", encoding="utf-8")

    assert main([str(path), "--config", str(config)]) == 0
    assert len(json.loads(capsys.readouterr().out)["color_palette"]) == 1


def test_unsupported_extension_fails(tmp_path, capsys):
    path = tmp_path / "notes.txt"
    path.write_text("hello", encoding="utf-8")

    assert main([str(path)]) == 1
    assert "Unsupported" in capsys.readouterr().err


def test_missing_file_fails(tmp_path, capsys):
    assert main([str(tmp_path / "missing.png")]) == 1
    assert "not found" in capsys.readouterr().err


def test_oversized_input_fails(tmp_path, divider_png, capsys):
    path = tmp_path / "template.png"
    path.write_bytes(divider_png)
    config = tmp_path / "analyzer.yaml"
    config.write_text("max_input_bytes: 16\n", encoding="utf-8")

    assert main([str(path), "--config", str(config)]) == 1
    assert "byte limit" in capsys.readouterr().err


def test_bad_config_files_fail_cleanly(tmp_path, divider_png, capsys):
    path = tmp_path / "template.png"
    path.write_bytes(divider_png)
    config = tmp_path / "analyzer.yaml"

    for text in ("palette_size: [1\n", "block_size: twenty\n"):
        config.write_text(text, encoding="utf-8")
        assert main([str(path), "--config", str(config)]) == 1
        assert "error: " in capsys.readouterr().err


def test_encrypted_pdf_fails_cleanly(tmp_path, capsys):
    doc = fitz.open()
    doc.new_page()
    path = tmp_path / "locked.pdf"
    path.write_bytes(doc.tobytes(encryption=fitz.PDF_ENCRYPT_AES_256, owner_pw="o", user_pw="u"))
    doc.close()

    assert main([str(path)]) == 1
    assert "password" in capsys.readouterr().err
