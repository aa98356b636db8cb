class DatasetError(Exception):
    "An error that happens through reading a malformed map dataset"
