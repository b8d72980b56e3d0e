#!/usr/bin/env python3
# *-* coding: utf-8 *-*

import configparser
import logging
from pathlib import Path

from warper import Corner, rectQuad

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = str(Path.home())+'/.config/quadwarp.ini'
SECTION = 'quadwarp'
CORNER_KEYS = ['topleft', 'topright', 'bottomright', 'bottomleft']
FORMATS = ['css', 'json', 'list']

class QuadConfigError(ValueError):
	pass

def parseCorner(value, key='corner'):
	parts = value.split(',')
	if(len(parts) != 2):
		raise QuadConfigError('{}: expected "x,y", got {!r}'.format(key, value))
	try:
		return Corner(float(parts[0]), float(parts[1]))
	except ValueError:
		raise QuadConfigError('{}: not a number in {!r}'.format(key, value))

class QuadConfig:
	def __init__(self):
		self.width = 100.0
		self.height = 100.0
		self.destination = None
		self.format = 'css'
		self.precision = None

	@property
	def source(self):
		return rectQuad(self.width, self.height)

	def destinationQuad(self):
		if(self.destination is None): return self.source
		return list(self.destination)

	def read(self, path=DEFAULT_CONFIG_PATH):
		configParser = configparser.ConfigParser()
		try:
			found = configParser.read(path)
		except configparser.Error as e:
			raise QuadConfigError('{}: {}'.format(path, e)) from e
		if(not found):
			logger.debug('No config file at %s, using defaults', path)
			return self
		if(not configParser.has_section(SECTION)):
			logger.debug('No [%s] section in %s', SECTION, path)
			return self

		try:
			config = dict(configParser.items(SECTION))
		except configparser.Error as e:
			raise QuadConfigError('{}: {}'.format(path, e)) from e
		self.width = self.__number(config, 'width', self.width)
		self.height = self.__number(config, 'height', self.height)

		corners = [config.get(key) for key in CORNER_KEYS]
		if(any(corners)):
			if(not all(corners)):
				raise QuadConfigError('destination needs all of: '+', '.join(CORNER_KEYS))
			self.destination = [parseCorner(value, key) for key, value in zip(CORNER_KEYS, corners)]

		self.format = config.get('format', self.format).strip()
		if(self.format not in FORMATS):
			raise QuadConfigError('format: must be one of {}, got {!r}'.format(', '.join(FORMATS), self.format))

		precision = config.get('precision', '').strip()
		if(precision):
			try:
				self.precision = int(precision)
			except ValueError:
				raise QuadConfigError('precision: not an integer: {!r}'.format(precision))

		logger.debug('Loaded config from %s', path)
		return self

	def __number(self, config, key, default):
		value = config.get(key)
		if(value is None or value.strip() == ''): return default
		try:
			number = float(value)
		except ValueError:
			raise QuadConfigError('{}: not a number: {!r}'.format(key, value))
		if(number <= 0):
			raise QuadConfigError('{}: must be positive, got {}'.format(key, number))
		return number

def loadConfig(path=None):
	return QuadConfig().read(path or DEFAULT_CONFIG_PATH)
