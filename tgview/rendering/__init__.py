"""Layout of reads, coverage, coordinates, cytobands, gene tracks, sequence, console, errors and help as styled text."""