"""Line sources for NMEA sentences: text files and a gpsd NMEA stream."""

from gpsnmea.gnss.reader import NMEAReader, decode_line, decode_lines, read_lines

__all__ = ["NMEAReader", "decode_line", "decode_lines", "read_lines"]
