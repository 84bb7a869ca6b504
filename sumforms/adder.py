import operator

def sumNamed(a, b):
	return a + b

sumLambda = lambda a, b: a + b

sumOperator = operator.add

class Sum:
	def __call__(self, a, b):
		return a + b

sumCallable = Sum()

# definition order, which is also the print order
ADDERS = (sumNamed, sumLambda, sumOperator, sumCallable)
