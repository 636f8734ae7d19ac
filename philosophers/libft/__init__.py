"""Small character, number, memory, string, output and linked-list helpers."""