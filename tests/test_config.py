import pytest

from template_analyzer import AnalyzerConfig, ConfigurationError, TemplateAnalyzer, load_config


def test_defaults_without_file():
    config = load_config(None)
    assert config == AnalyzerConfig()
    assert config.block_size == 20
    assert config.palette_size == 8
    assert config.pdf_render_scale == 2.0


def test_missing_file_falls_back_to_defaults(tmp_path):
    assert load_config(str(tmp_path / "absent.yaml")) == AnalyzerConfig()


def test_flat_mapping(tmp_path):
    path = tmp_path / "analyzer.yaml"
    path.write_text("palette_size: 4\nedge_threshold: 45\n", encoding="utf-8")
    config = load_config(str(path))
    assert config.palette_size == 4
    assert config.edge_threshold == 45
    assert config.block_size == 20


def test_nested_analyzer_section(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("analyzer:\n  line_row_step: 1\n  grid_snap: 5\nother: true\n", encoding="utf-8")
    config = load_config(str(path))
    assert config.line_row_step == 1
    assert config.grid_snap == 5


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)) == AnalyzerConfig()


def test_unknown_keys_are_ignored(tmp_path, caplog):
    path = tmp_path / "analyzer.yaml"
    path.write_text("palette_size: 3\nshadow_depth: 9\n", encoding="utf-8")
    config = load_config(str(path))
    assert config.palette_size == 3
    assert "shadow_depth" in caplog.text


def test_non_mapping_file_is_rejected(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(str(path))


@pytest.mark.parametrize("overrides", [
    {"block_size": 1},
    {"palette_sample_stride": 0},
    {"merge_tolerance": -1},
    {"pdf_render_scale": 0},
    {"alpha_threshold": 300},
])
def test_invalid_values_raise(overrides):
    with pytest.raises(ConfigurationError):
        AnalyzerConfig(**overrides)


def test_config_reaches_detectors():
    analyzer = TemplateAnalyzer(AnalyzerConfig(palette_size=2, block_size=10, line_row_step=1))
    assert analyzer.color_extractor.max_colors == 2
    assert analyzer.text_detector.block_size == 10
    assert analyzer.element_detector.row_step == 1


def test_to_dict_round_trip():
    config = AnalyzerConfig(grid_snap=4)
    assert AnalyzerConfig.from_dict(config.to_dict()) == config


def test_malformed_yaml_is_a_configuration_error(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("palette_size: [1\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="not valid YAML"):
        load_config(str(path))


@pytest.mark.parametrize("text", [
    "block_size: twenty\n",
    "edge_threshold: [30]\n",
    "block_size: 20.5\n",
    "palette_size: true\n",
])
def test_wrongly_typed_values_raise(tmp_path, text):
    path = tmp_path / "analyzer.yaml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigurationError, match="must be"):
        load_config(str(path))


def test_float_setting_accepts_integer():
    assert AnalyzerConfig(pdf_render_scale=1).pdf_render_scale == 1
