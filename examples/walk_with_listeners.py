import logging

import chordwalk
import chordwalk.selection

logging.basicConfig(level=logging.INFO)

# Fixed seed: the same voice B pitch and rhythms every run.
performance = chordwalk.Performance(ticks_per_quarter=480, octave=4, seed=2024)

# ii-V-I in Bb.
selection = chordwalk.selection.Selection(root_pc=10, scale="major", progression=[1, 4, 0])

if __name__ == "__main__":

	sink = chordwalk.MidiFileSink("walk.mid", track_name=selection.scale_name)
	performance.on("event", sink.emit)

	performance.on("section", lambda name: print(f"-- {name}"))
	performance.on("chord_missing", lambda miss: print(f"   skipped {miss.label}: {miss.reason}"))

	result = performance.play(selection, scale_run=True)

	print(f"{len(result.events)} events, {result.total_ticks} ticks, {len(result.misses)} skipped")
	sink.save()
