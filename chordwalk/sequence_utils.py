import typing


def generate_euclidean_sequence (steps: int, pulses: int) -> typing.List[int]:

	"""
	Generate a Euclidean rhythm using Bjorklund's algorithm.
	"""

	if steps < 0 or pulses < 0:
		raise ValueError(f"Steps ({steps}) and pulses ({pulses}) must not be negative")

	if pulses == 0:
		return [0] * steps

	if pulses > steps:
		raise ValueError(f"Pulses ({pulses}) cannot be greater than steps ({steps})")

	sequence = []
	counts = []
	remainders = []
	divisor = steps - pulses

	remainders.append(pulses)
	level = 0

	while True:
		counts.append(divisor // remainders[level])
		remainders.append(divisor % remainders[level])
		divisor = remainders[level]
		level += 1
		if remainders[level] <= 1:
			break

	counts.append(divisor)

	def build (level: int) -> None:
		if level == -1:
			sequence.append(0)
		elif level == -2:
			sequence.append(1)
		else:
			for i in range(counts[level]):
				build(level - 1)
			if remainders[level] != 0:
				build(level - 2)

	build(level)
	i = sequence.index(1)
	return sequence[i:] + sequence[:i]


def euclidean_rhythm (pulses: int, steps: int) -> typing.List[bool]:

	"""
	Return a Euclidean rhythm as booleans, ``True`` on each onset.

	The result always has exactly ``steps`` entries, ``pulses`` of them on.

	Example:
		```python
		euclidean_rhythm(3, 8)
		# → [True, False, False, True, False, False, True, False]
		```
	"""

	return [bool(hit) for hit in generate_euclidean_sequence(steps, pulses)]


def sequence_to_indices (sequence: typing.Sequence[typing.Any]) -> typing.List[int]:

	"""Extract step indices where hits occur in a binary sequence."""

	return [i for i, v in enumerate(sequence) if v]
