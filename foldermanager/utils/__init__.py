# foldermanager/utils — pure helpers. No I/O prompts, no printing.
