#!/usr/bin/env python3
# *-* coding: utf-8 *-*

from collections import namedtuple

# matrices are flat lists, Mat3 row-major (9 values), Mat4 column-major (16 values)

Corner = namedtuple('Corner', ['x', 'y'])

class TransformStatus:
	OK = 'ok'
	SINGULAR_SOURCE = 'singular-source'
	SINGULAR_DESTINATION = 'singular-destination'
	DEGENERATE_NORMALIZATION = 'degenerate-normalization'

class TransformResult:
	def __init__(self, status, matrix=None, coefficients=None):
		self.status = status
		self.matrix = matrix
		self.coefficients = coefficients

	@property
	def ok(self):
		return self.status == TransformStatus.OK

	def __bool__(self):
		return self.ok

	def __repr__(self):
		return 'TransformResult({!r}, coefficients={!r})'.format(self.status, self.coefficients)

	def css(self):
		if(not self.ok): return ''
		return toCssMatrix3d(self.coefficients)

def toCorner(point):
	if(isinstance(point, Corner)):
		return point
	x, y = point
	return Corner(float(x), float(y))

def toQuad(points):
	quad = [toCorner(p) for p in points]
	if(len(quad) != 4):
		raise ValueError('a quad needs exactly 4 corners, got {}'.format(len(quad)))
	return quad

def rectQuad(width, height):
	return [Corner(0, 0), Corner(width, 0), Corner(width, height), Corner(0, height)]

def solve(A, b):
	"""Solve A*x = b for a 3x3 A through its adjoint; None if A is singular."""
	det = (
		A[0] * (A[4] * A[8] - A[5] * A[7])
		- A[1] * (A[3] * A[8] - A[5] * A[6])
		+ A[2] * (A[3] * A[7] - A[4] * A[6])
	)
	if(det == 0): return None
	idet = 1.0 / det

	adjA = [val * idet for val in adj(A)]
	return [
		adjA[0] * b[0] + adjA[1] * b[1] + adjA[2] * b[2],
		adjA[3] * b[0] + adjA[4] * b[1] + adjA[5] * b[2],
		adjA[6] * b[0] + adjA[7] * b[1] + adjA[8] * b[2],
	]

def adj(m):
	# transposed cofactors, not divided by the determinant
	return [
		m[4] * m[8] - m[5] * m[7],
		m[2] * m[7] - m[1] * m[8],
		m[1] * m[5] - m[2] * m[4],
		m[5] * m[6] - m[3] * m[8],
		m[0] * m[8] - m[2] * m[6],
		m[2] * m[3] - m[0] * m[5],
		m[3] * m[7] - m[4] * m[6],
		m[1] * m[6] - m[0] * m[7],
		m[0] * m[4] - m[1] * m[3],
	]

def multmm(a, b):
	c = [0] * 9
	for r in range(0, 3):
		ri = r * 3
		for col in range(0, 3):
			c[ri + col] = (
				a[ri] * b[col]
				+ a[ri + 1] * b[col + 3]
				+ a[ri + 2] * b[col + 6]
			)
	return c

def basisToPoints(p1, p2, p3, p4):
	"""Matrix mapping the homogeneous unit basis onto p1, p2, p3 with (1,1,1) landing on p4."""
	m = [
		p1.x, p2.x, p3.x,
		p1.y, p2.y, p3.y,
		1, 1, 1,
	]
	s = solve(m, [p4.x, p4.y, 1])
	# a zero weight means p4 is collinear with two of the others
	if(s is None or 0 in s): return None
	return [
		m[0] * s[0], m[1] * s[1], m[2] * s[2],
		m[3] * s[0], m[4] * s[1], m[5] * s[2],
		m[6] * s[0], m[7] * s[1], m[8] * s[2],
	]

def _compose(srcQuad, dstQuad):
	m1 = basisToPoints(srcQuad[0], srcQuad[1], srcQuad[2], srcQuad[3])
	if(m1 is None): return TransformStatus.SINGULAR_SOURCE, None
	m2 = basisToPoints(dstQuad[0], dstQuad[1], dstQuad[2], dstQuad[3])
	if(m2 is None): return TransformStatus.SINGULAR_DESTINATION, None

	# adj(m1) instead of the inverse, the overall scale is removed below
	m3 = multmm(m2, adj(m1))

	scale = m3[8]
	if(scale == 0): return TransformStatus.DEGENERATE_NORMALIZATION, None
	return TransformStatus.OK, [val / scale for val in m3]

def compose(srcQuad, dstQuad):
	"""Normalized 3x3 homography taking srcQuad onto dstQuad, or None when degenerate."""
	return _compose(toQuad(srcQuad), toQuad(dstQuad))[1]

def toHomogeneous4x4(m3):
	# z axis stays identity
	return (
		m3[0], m3[3], 0, m3[6],
		m3[1], m3[4], 0, m3[7],
		0, 0, 1, 0,
		m3[2], m3[5], 0, m3[8],
	)

def toCssMatrix3d(coefficients):
	return 'matrix3d({})'.format(','.join(repr(c) for c in coefficients))

def computeTransform(sourceQuad, destinationQuad):
	"""Map sourceQuad onto destinationQuad.

	Both quads are given as [topLeft, topRight, bottomRight, bottomLeft].
	Returns a TransformResult; on degenerate input its coefficients are None
	and its status tells which side failed.
	"""
	status, m3 = _compose(toQuad(sourceQuad), toQuad(destinationQuad))
	if(m3 is None):
		return TransformResult(status)
	return TransformResult(status, tuple(m3), toHomogeneous4x4(m3))

def projectPoint(m3, x, y):
	w = m3[6] * x + m3[7] * y + m3[8]
	return (
		(m3[0] * x + m3[1] * y + m3[2]) / w,
		(m3[3] * x + m3[4] * y + m3[5]) / w,
	)

class warper:
	def __init__(self, width=1, height=1):
		self.src = rectQuad(width, height)
		self.dst = rectQuad(width, height)
		self.result = None
		self.computed = False

	def setSource(self, x0, y0, x1, y1, x2, y2, x3, y3):
		self.src = toQuad([(x0, y0), (x1, y1), (x2, y2), (x3, y3)])
		self.computed = False

	def setDestination(self, x0, y0, x1, y1, x2, y2, x3, y3):
		self.dst = toQuad([(x0, y0), (x1, y1), (x2, y2), (x3, y3)])
		self.computed = False

	def computeWarp(self):
		self.result = computeTransform(self.src, self.dst)
		self.computed = True
		return self.result

	def warp(self, srcX, srcY):
		if not self.computed: self.computeWarp()
		if(not self.result.ok): return None
		return projectPoint(self.result.matrix, srcX, srcY)
