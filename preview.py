#!/usr/bin/env python3
# *-* coding: utf-8 *-*

import logging
import sys

from PyQt5.QtWidgets import *
from PyQt5.QtGui import *
from PyQt5.QtCore import *

logger = logging.getLogger(__name__)

def toQTransform(m3):
	# QTransform maps row vectors, so the 3x3 goes in transposed
	return QTransform(
		m3[0], m3[3], m3[6],
		m3[1], m3[4], m3[7],
		m3[2], m3[5], m3[8],
	)

class PreviewWindow(QWidget):
	MARGIN = 20
	GRID_STEPS = 10

	def __init__(self, sourceQuad, destinationQuad, matrix):
		super(PreviewWindow, self).__init__()
		self.setWindowTitle('quadwarp preview')
		self.sourceQuad = sourceQuad
		self.destinationQuad = destinationQuad
		self.transform = toQTransform(matrix)

		xs = [c.x for c in destinationQuad]
		ys = [c.y for c in destinationQuad]
		self.offset = QPointF(self.MARGIN - min(xs), self.MARGIN - min(ys))
		self.resize(
			int(max(xs) - min(xs)) + 2 * self.MARGIN,
			int(max(ys) - min(ys)) + 2 * self.MARGIN
		)

	def paintEvent(self, event):
		painter = QPainter(self)
		painter.setRenderHint(QPainter.Antialiasing)
		painter.translate(self.offset)

		# destination corners, untransformed
		painter.setPen(QPen(Qt.red, 2, Qt.SolidLine))
		for corner in self.destinationQuad:
			painter.drawEllipse(QPointF(corner.x, corner.y), 4, 4)

		# source grid, through the perspective transform
		painter.setTransform(self.transform, True)
		painter.setPen(QPen(Qt.darkGray, 0, Qt.SolidLine))
		topLeft, topRight, bottomRight, bottomLeft = self.sourceQuad
		for i in range(0, self.GRID_STEPS + 1):
			t = i / self.GRID_STEPS
			painter.drawLine(self.__lerp(topLeft, bottomLeft, t), self.__lerp(topRight, bottomRight, t))
			painter.drawLine(self.__lerp(topLeft, topRight, t), self.__lerp(bottomLeft, bottomRight, t))
		painter.setPen(QPen(Qt.blue, 0, Qt.SolidLine))
		painter.drawPolygon(QPolygonF([QPointF(c.x, c.y) for c in self.sourceQuad]))

	def __lerp(self, a, b, t):
		return QPointF(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)

def showPreview(sourceQuad, destinationQuad, matrix):
	app = QApplication.instance() or QApplication(sys.argv)
	window = PreviewWindow(sourceQuad, destinationQuad, matrix)
	window.show()
	logger.debug('Preview window opened')
	return app.exec_()
