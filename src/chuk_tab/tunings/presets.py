"""
Built-in tuning presets.

Notes run from string 1 (highest, top row of the tab) to the lowest string.
"""

from chuk_tab.models.tuning import TuningPreset

BUILTIN_TUNINGS: dict[str, TuningPreset] = {
    preset.name: preset
    for preset in [
        TuningPreset(
            name="standard",
            description="Standard six-string guitar",
            notes=("E4", "B3", "G3", "D3", "A2", "E2"),
        ),
        TuningPreset(
            name="drop-d",
            description="Guitar with the low E dropped to D",
            notes=("E4", "B3", "G3", "D3", "A2", "D2"),
        ),
        TuningPreset(
            name="open-g",
            description="Open G guitar",
            notes=("D4", "B3", "G3", "D3", "G2", "D2"),
        ),
        TuningPreset(
            name="dadgad",
            description="DADGAD guitar",
            notes=("D4", "A3", "G3", "D3", "A2", "D2"),
        ),
        TuningPreset(
            name="bass",
            description="Standard four-string bass",
            notes=("G2", "D2", "A1", "E1"),
        ),
        TuningPreset(
            name="ukulele",
            description="Ukulele, re-entrant GCEA",
            notes=("A4", "E4", "C4", "G4"),
        ),
    ]
}
