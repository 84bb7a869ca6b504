from sumforms import adder

A = 32
B = 64

def run(a=A, b=B):
	return [add(a, b) for add in adder.ADDERS]

def formatLine(results):
	return " ".join(str(r) for r in results)

def main():
	print(formatLine(run()))
	return 0

if __name__ == "__main__":
	raise SystemExit(main())
