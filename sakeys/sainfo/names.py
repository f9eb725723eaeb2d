from sakeys.typing import SAModel


def model_name(Model: SAModel) -> str:
    """ Get the name of the Model for this class """
    return Model.__name__
