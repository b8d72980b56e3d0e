"""
Shared fixtures for the quadwarp tests.
"""
import sys
import os
import pytest

# Modules live at the project root
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from warper import rectQuad


@pytest.fixture
def square():
	"""100x100 source rectangle"""
	return rectQuad(100, 100)


@pytest.fixture
def trapezoid():
	"""Top edge narrower than the bottom one"""
	return [(20, 0), (80, 0), (100, 100), (0, 100)]


@pytest.fixture
def collinear_quad():
	"""First three corners on one line"""
	return [(0, 0), (10, 0), (20, 0), (0, 10)]


@pytest.fixture
def missing_config(tmp_path):
	"""Path of a config file that does not exist"""
	return str(tmp_path / 'missing.ini')
