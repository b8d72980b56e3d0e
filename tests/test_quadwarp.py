"""
Tests for the quadwarp command line and the Qt conversion
"""

import json

import pytest

from quadwarp import EXIT_DEGENERATE, formatCoefficients, main
from warper import computeTransform, rectQuad

IDENTITY_4X4 = [1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1]


def test_json_output(missing_config, capsys):
	code = main([
		'--config', missing_config, '--width', '100', '--height', '100',
		'--dst', '0,0', '200,0', '200,200', '0,200', '--format', 'json',
	])
	assert code == 0
	coefficients = json.loads(capsys.readouterr().out)
	assert coefficients == pytest.approx([2, 0, 0, 0, 0, 2, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1], abs=1e-12)


def test_default_is_identity_css(missing_config, capsys):
	assert main(['--config', missing_config, '--precision', '6']) == 0
	out = capsys.readouterr().out.strip()
	assert out.startswith('matrix3d(')
	values = [float(v) for v in out[len('matrix3d('):-1].split(',')]
	assert values == IDENTITY_4X4


def test_src_overrides_rectangle(missing_config, capsys):
	code = main([
		'--config', missing_config, '--format', 'list',
		'--src', '0,0', '50,0', '50,50', '0,50',
		'--dst', '10,10', '60,10', '60,60', '10,60',
	])
	assert code == 0
	values = [float(v) for v in capsys.readouterr().out.strip().split(',')]
	assert values[12:14] == pytest.approx([10, 10])


def test_config_destination(tmp_path, capsys):
	path = tmp_path / 'quadwarp.ini'
	path.write_text(
		'[quadwarp]\n'
		'topleft = 10,10\ntopright = 110,10\nbottomright = 110,110\nbottomleft = 10,110\n'
		'format = json\n'
	)
	assert main(['--config', str(path)]) == 0
	coefficients = json.loads(capsys.readouterr().out)
	assert coefficients[12:14] == pytest.approx([10, 10])


def test_degenerate_destination(missing_config, capsys):
	code = main(['--config', missing_config, '--dst', '0,0', '10,0', '20,0', '0,10'])
	assert code == EXIT_DEGENERATE
	captured = capsys.readouterr()
	assert captured.out == ''
	assert 'singular-destination' in captured.err


def test_bad_corner_argument(missing_config):
	with pytest.raises(SystemExit) as excinfo:
		main(['--config', missing_config, '--dst', 'a,b', '1,0', '1,1', '0,1'])
	assert excinfo.value.code == 2


def test_bad_width_argument(missing_config):
	with pytest.raises(SystemExit) as excinfo:
		main(['--config', missing_config, '--width', '0'])
	assert excinfo.value.code == 2


def test_format_precision():
	coefficients = computeTransform(rectQuad(3, 3), rectQuad(1, 1)).coefficients
	assert formatCoefficients(coefficients, 'list', 3).split(',')[0] == '0.333'


def test_qtransform_maps_corners(trapezoid):
	pytest.importorskip('PyQt5.QtWidgets')
	from PyQt5.QtCore import QPointF
	from preview import toQTransform

	src = rectQuad(100, 100)
	transform = toQTransform(computeTransform(src, trapezoid).matrix)
	for corner, (x, y) in zip(src, trapezoid):
		mapped = transform.map(QPointF(corner.x, corner.y))
		assert (mapped.x(), mapped.y()) == pytest.approx((x, y), abs=1e-6)


def test_percent_sign_in_config(tmp_path):
	path = tmp_path / 'quadwarp.ini'
	path.write_text('[quadwarp]\nformat = 50%\n')
	with pytest.raises(SystemExit) as excinfo:
		main(['--config', str(path)])
	assert excinfo.value.code == 2


def test_degenerate_reports_once(missing_config, capsys):
	main(['--config', missing_config, '--dst', '0,0', '10,0', '20,0', '0,10'])
	err = capsys.readouterr().err
	assert err.count('no transform possible') == 1
	assert 'No transform possible' not in err
