#!/usr/bin/env python3
# *-* coding: utf-8 *-*
"""quadwarp - perspective transform between two quads.

Prints the 16 coefficients of the 4x4 homogeneous (column-major) matrix
that takes the source rectangle onto four destination corners, ready to be
used as a CSS matrix3d() transform.

Usage:
    quadwarp --width 400 --height 300 --dst 20,0 380,0 400,300 0,300
    quadwarp --config ~/.config/quadwarp.ini --format json
    quadwarp --dst 20,0 80,0 100,100 0,100 --preview
"""

import argparse
import json
import logging
import sys

import quadconfig
from warper import computeTransform, rectQuad, toCssMatrix3d

logger = logging.getLogger(__name__)

EXIT_DEGENERATE = 1

def formatCoefficients(coefficients, outputFormat='css', precision=None):
	if(precision is not None):
		coefficients = [round(c, precision) for c in coefficients]
	if(outputFormat == 'json'):
		return json.dumps(list(coefficients))
	elif(outputFormat == 'list'):
		return ','.join(repr(c) for c in coefficients)
	return toCssMatrix3d(coefficients)

def buildParser():
	parser = argparse.ArgumentParser(
		prog='quadwarp',
		description='Compute the perspective transform taking a rectangle onto four corners.',
	)
	parser.add_argument('--config', help='INI file to read (default: '+quadconfig.DEFAULT_CONFIG_PATH+')')
	parser.add_argument('--width', type=float, help='Width of the source rectangle.')
	parser.add_argument('--height', type=float, help='Height of the source rectangle.')
	parser.add_argument(
		'--src', nargs=4, metavar='X,Y',
		help='Source corners (topleft topright bottomright bottomleft), overrides --width/--height.',
	)
	parser.add_argument(
		'--dst', nargs=4, metavar='X,Y',
		help='Destination corners (topleft topright bottomright bottomleft).',
	)
	parser.add_argument('--format', choices=quadconfig.FORMATS, help='Output format.')
	parser.add_argument('--precision', type=int, help='Round coefficients to this many decimals.')
	parser.add_argument('--preview', action='store_true', help='Show the transformed grid in a window.')
	parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging.')
	return parser

def main(argv=None):
	parser = buildParser()
	args = parser.parse_args(argv)

	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
		handlers=[logging.StreamHandler(sys.stderr)],
	)

	try:
		config = quadconfig.loadConfig(args.config)
		if(args.width is not None): config.width = args.width
		if(args.height is not None): config.height = args.height
		if(config.width <= 0 or config.height <= 0):
			raise ValueError('width and height must be positive')
		if(args.src):
			source = [quadconfig.parseCorner(value, '--src') for value in args.src]
		else:
			source = rectQuad(config.width, config.height)
		if(args.dst):
			destination = [quadconfig.parseCorner(value, '--dst') for value in args.dst]
		elif(args.src):
			destination = source
		else:
			destination = config.destinationQuad()
	except ValueError as e:
		parser.error(str(e))

	outputFormat = args.format or config.format
	precision = args.precision if args.precision is not None else config.precision

	logger.debug('Source quad: %s', source)
	logger.debug('Destination quad: %s', destination)
	result = computeTransform(source, destination)
	if(not result.ok):
		logger.debug('No transform possible: %s', result.status)
		print('quadwarp: no transform possible ('+result.status+')', file=sys.stderr)
		return EXIT_DEGENERATE

	print(formatCoefficients(result.coefficients, outputFormat, precision))

	if(args.preview):
		from preview import showPreview
		return showPreview(source, destination, result.matrix)
	return 0

if __name__ == '__main__':
	sys.exit(main())
