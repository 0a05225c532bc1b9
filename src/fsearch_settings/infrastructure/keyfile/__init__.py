"""Group-keyed key/value file and the codecs that read and write it."""
