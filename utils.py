import os

INPUT_FILE_DIRECTORY = "inputs"
OUTPUT_FILE_DIRECTORY = "outputs"
INPUT_FILE_EXTENSION = ".txt"
OUTPUT_FILE_EXTENSION = ".out"
MAXIMUM_EXACT_CITIES = 20
BRUTE_FORCE_LIMIT = 10
MAXIMUM_FLOAT_DIGITS = 5

def get_files_with_extension(directory, extension):
    """
    Sorted names of the files in directory ending with extension
    """
    files = []
    for file in os.listdir(directory):
        if file.endswith(extension):
            files.append(file)
    return sorted(files)

def input_path_to_file_paths(path, extension=INPUT_FILE_EXTENSION):
    """
    Resolve a command line path to the list of input files it names.
    A directory expands to every file with the extension inside it.
    """
    if os.path.isdir(path):
        return [os.path.join(path, file) for file in get_files_with_extension(path, extension)]
    return [path]

def read_file(file):
    """
    Read file as a list of non-blank lines, each split into its words.
    """
    with open(file, 'r') as f:
        lines = f.readlines()
    return [line.strip().split() for line in lines if line.strip()]

def write_to_file(file, data, mode='w'):
    """
    Write data to file, truncating it unless mode says otherwise.
    """
    with open(file, mode) as f:
        f.write(data)
