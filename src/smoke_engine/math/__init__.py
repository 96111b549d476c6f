"""Pure cook-time, confidence and calibration math."""
