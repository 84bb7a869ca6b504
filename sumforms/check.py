import os
import random

import numpy

from sumforms import adder

ENV_PREFIX = "PARAM_"

# numpy batches run on int64, so two WIDTH-bit operands must sum inside it
MAX_WIDTH = 63

def parseValue(text):
	for convert in (int, float):
		try:
			return convert(text)
		except ValueError:
			continue
	lowered = text.lower()
	if lowered == "true":
		return True
	if lowered == "false":
		return False
	return text

class Settings:
	def __init__(self, environ=None):
		self.COUNT = 1000
		self.WIDTH = 16
		self.SEED = random.randint(-1_000_000_000, 1_000_000_000)
		self.REAL = False
		self.PREC = 5
		self.LOG = "check.log"

		environ = os.environ if environ is None else environ
		for key, text in environ.items():
			if key.startswith(ENV_PREFIX):
				setattr(self, key[len(ENV_PREFIX):], parseValue(text))

	def __str__(self):
		fields = sorted(vars(self).items())
		return " ".join(f"{name}={value}" for name, value in fields)

class CheckLog:
	"""Line-per-event log file that counts failed expectations."""

	def __init__(self, path):
		self.stream = open(path, "w")
		self.failures = 0

	def write(self, level, msg):
		print(f"{level}: {msg}", file=self.stream)

	def expect(self, cond, msg):
		if not cond:
			self.failures += 1
			self.write("error", msg)

	def close(self):
		self.stream.close()

	def verdict(self):
		if self.failures:
			raise AssertionError(f"check failed with {self.failures} errors.")

def sameValue(v0, v1, prec=None):
	if isinstance(v0, numpy.ndarray) or isinstance(v1, numpy.ndarray):
		if prec is None:
			return bool(numpy.array_equal(v0, v1))
		return bool(numpy.all(numpy.abs(numpy.subtract(v0, v1)) <= 0.5**prec))
	# plain Python numbers, compared without numpy so ints of any size work
	if prec is None:
		return v0 == v1
	return abs(v0 - v1) <= 0.5**prec

class Bench:
	def __init__(self, settings=None, adders=adder.ADDERS):
		self.settings = Settings() if settings is None else settings
		if not 1 <= self.settings.WIDTH <= MAX_WIDTH:
			raise ValueError(f"WIDTH must be in 1..{MAX_WIDTH}, got {self.settings.WIDTH}")
		self.adders = adders
		self.prec = self.settings.PREC if self.settings.REAL else None
		self.log = None

	def draw(self, rng):
		bound = 2**(self.settings.WIDTH-1)
		if self.settings.REAL:
			return rng.uniform(-bound, bound), rng.uniform(-bound, bound)
		return rng.randint(-bound, bound-1), rng.randint(-bound, bound-1)

	def checkPair(self, a, b):
		expected = a + b
		results = [add(a, b) for add in self.adders]
		self.log.write("info", f"{a} + {b} -> {results}")
		for i, result in enumerate(results):
			self.log.expect(sameValue(result, expected, self.prec), f"adder {i}: {a} + {b} gave {result}, expected {expected}")
		return results

	def checkBatch(self, aVals, bVals):
		a = numpy.asarray(aVals)
		b = numpy.asarray(bVals)
		expected = numpy.add(a, b)
		for i, add in enumerate(self.adders):
			self.log.expect(sameValue(add(a, b), expected, self.prec), f"adder {i}: array sum of {len(a)} pairs differs from numpy.add")

	def run(self):
		self.log = CheckLog(self.settings.LOG)
		try:
			self.log.write("info", f"settings {self.settings}")
			rng = random.Random(self.settings.SEED)
			pairs = [self.draw(rng) for _ in range(self.settings.COUNT)]
			for a, b in pairs:
				self.checkPair(a, b)
			if pairs:
				self.checkBatch(*zip(*pairs))
		finally:
			self.log.close()
		self.log.verdict()
		return len(pairs)

def main():
	count = Bench().run()
	print(f"checked {count} pairs")
	return 0

if __name__ == "__main__":
	raise SystemExit(main())
