from asa.reader.parser import parse_program
