"""Character, memory, string, output and conversion helpers."""