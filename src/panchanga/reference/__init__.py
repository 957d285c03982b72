"""Sun/Moon position engine: mean elements, periodic series, ΔT, nutation, ayanamsa."""
