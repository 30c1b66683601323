# sugarpipe.demos
# The two console demos: `extension` (string helpers) and `linq` (lazy queries).
