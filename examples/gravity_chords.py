import itertools
import logging

import accretion
import accretion.chords
import accretion.display
import accretion.intervals
import accretion.midi_export
import accretion.pitch
import accretion.sequence_utils

logging.basicConfig(level=logging.INFO)

BPM = 110
STEP_MS = accretion.pitch.beats_to_ms(0.25, BPM)

# Heavy bodies at the edges pull the lighter middle ones outward; the pair
# at 120/121 share a collision quantum and merge on the first tick.
POSITIONS = [0, 120, 121, 410, 700, 1300, 2100]
MASSES = [4e6, 6e5, 6e5, 8e4, 2e6, 9e5, 5e6]

for line in accretion.display.render_trace(POSITIONS, MASSES, time=30, scale=28):
	print(line)

offsets = accretion.simulate(POSITIONS, MASSES, time=30)
onsets = accretion.sequence_utils.normalize_offsets(offsets)

steps = accretion.sequence_utils.offsets_to_steps(onsets, step_ms=STEP_MS, steps=16)
print("Grid:", "".join("x" if s else "." for s in steps))

# Order a small palette from most to least consonant and walk through it,
# voice-leading each chord from the one before.
palette = [
	accretion.chords.Chord.from_name(root, quality)
	for root, quality in [("A", "minor_7th"), ("F", "major_7th"), ("E", "dominant_7th"), ("B", "half_diminished_7th")]
]
ranked = accretion.intervals.rank_chords([chord.tones(57) for chord in palette])

previous = None

for onset, notes in zip(onsets, itertools.cycle(ranked)):
	intervals = [n - notes[0] for n in notes]
	previous = accretion.chords.voice_lead(intervals, notes[0], previous)
	hz = ", ".join(f"{accretion.pitch.midi_to_frequency(n):.1f}" for n in previous)
	print(f"{onset:8.1f} ms  {previous}  ({hz} Hz)")

accretion.midi_export.save_offsets(offsets, "gravity_chords.mid", bpm=BPM)
