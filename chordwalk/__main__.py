import argparse
import logging
import os
import sys
import typing

import yaml

import chordwalk.constants
import chordwalk.constants.velocity
import chordwalk.intervals
import chordwalk.midi_file
import chordwalk.performance
import chordwalk.selection


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "chordwalk.yaml"
DEFAULT_OUTPUT = "output.mid"
DEFAULT_OCTAVE = 3


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		return yaml.safe_load(f) or {}


def build_parser () -> argparse.ArgumentParser:

	parser = argparse.ArgumentParser(prog="chordwalk", description="Generate a chord progression, scale-chord walk and euclidean improvisation as a MIDI file")
	parser.add_argument("--root", default=None, help="Root note to use (e.g. C, F#, Bb)")
	parser.add_argument("--freq", type=float, default=None, help="Use this frequency (Hz) as the root of the generated data")
	parser.add_argument("--octave", type=int, default=None, help=f"Octave the improvised voice starts from (default: {DEFAULT_OCTAVE})")
	parser.add_argument("--minor", action="store_true", help="Use the melodic minor scale")
	parser.add_argument("--output", "-o", default=None, help=f"Destination MIDI file (default: {DEFAULT_OUTPUT})")
	parser.add_argument("--seed", type=int, default=None, help="Seed for repeatable output")
	parser.add_argument("--scale-run", action="store_true", help="Play the scale upwards before the progression")
	parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help=f"YAML config file (default: {DEFAULT_CONFIG_PATH})")
	parser.add_argument("--verbose", "-v", action="store_true", help="Log every bar of the improvisation")

	return parser


def main (argv: typing.Optional[typing.List[str]] = None) -> None:

	"""
	Main entry point for the chordwalk command.
	"""

	args = build_parser().parse_args(argv)

	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

	config = load_config(args.config)
	midi_config = config.get('midi', {})
	output = args.output or config.get('output', {}).get('filename', DEFAULT_OUTPUT)

	try:
		ticks_per_quarter = int(midi_config.get('ticks_per_quarter', chordwalk.constants.TICKS_PER_QUARTER))
		velocity = int(midi_config.get('velocity', chordwalk.constants.velocity.DEFAULT_VELOCITY))
		channel = int(midi_config.get('channel', chordwalk.constants.velocity.DEFAULT_CHANNEL))
		octave = args.octave if args.octave is not None else int(config.get('generation', {}).get('octave', DEFAULT_OCTAVE))
	except (TypeError, ValueError) as e:
		logger.error(f"Invalid value in {args.config}: {e}")
		sys.exit(1)

	try:
		performance = chordwalk.performance.Performance(
			ticks_per_quarter=ticks_per_quarter,
			octave=octave,
			velocity=velocity,
			channel=channel,
			seed=args.seed
		)
		sink = chordwalk.midi_file.MidiFileSink(output, ticks_per_quarter=ticks_per_quarter)

		def name_track (selection: chordwalk.selection.Selection) -> None:
			_, names = chordwalk.intervals.scale_degrees(selection.root_pc, selection.scale)
			sink.set_track_name(f"{selection.scale_name} {names}")

		performance.on("selected", name_track)
		performance.on("event", sink.emit)

		result = performance.generate(root=args.root, frequency=args.freq, minor=args.minor, scale_run=args.scale_run)

	except ValueError as e:
		logger.error(str(e))
		sys.exit(1)

	if result.misses:
		logger.warning(f"{len(result.misses)} chord(s) skipped")

	try:
		sink.save()
	except OSError as e:
		logger.error(f"Could not write {output}: {e}")
		sys.exit(1)


if __name__ == "__main__":
	main()
