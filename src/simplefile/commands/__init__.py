"""Program entry points: the reader and the writer."""
