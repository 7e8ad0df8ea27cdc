
"""
Accretion - rhythm from gravity.

Accretion generates rhythmic onsets by simulating point masses on a single
axis.  Bodies attract each other with inverse-square gravity, drift with a
fixed-step Euler integrator, and merge when neighbours fall into the same
spatial quantum.  The surviving positions, read as millisecond offsets, are
the rhythm.

Around the simulator sit a few composition helpers:

- **Chords.** ``Chord`` naming, ``rotate_chord()`` and ``expand_chord()``
  over absolute pitch collections, and smooth ``voice_lead()``.
- **Intervals.** Named interval sets and heuristic consonance scoring
  (``score_chord()``, ``rank_chords()``).
- **Pitch.** MIDI/frequency conversion and ms/beat conversion.
- **Sequences.** Sorting, normalising and gridding offsets.
- **Output.** An ASCII trace of each tick (``accretion.display``) and
  Standard MIDI File export (``accretion.midi_export``).

Minimal example:

    ```python
    import accretion

    offsets = accretion.simulate([0, 300, 900], [5e5, 5e5, 5e5], time=50)

    for line in accretion.display.render_trace([0, 300, 900], [5e5, 5e5, 5e5], time=10, scale=12):
        print(line)
    ```

Package-level exports: ``Body``, ``Chord``, ``Simulation``, ``Snapshot``,
``simulate``, ``trace``, ``InvalidConfigurationError``, ``DegenerateForceError``.
"""

import accretion.body
import accretion.chords
import accretion.display
import accretion.forces
import accretion.simulation


Body = accretion.body.Body
Chord = accretion.chords.Chord
Simulation = accretion.simulation.Simulation
Snapshot = accretion.simulation.Snapshot
simulate = accretion.simulation.simulate
trace = accretion.simulation.trace
InvalidConfigurationError = accretion.simulation.InvalidConfigurationError
DegenerateForceError = accretion.forces.DegenerateForceError
