class ConfigurationError(ValueError):
  '''bad widget kind / option / abstract usage, raised while building. [kind] names the offending kind'''
  def __init__(self, msg:str, kind=None):
    super().__init__(msg)
    self.kind = kind

MSG_UNKNOWN_KIND = "Don't know how to create %s"
MSG_UNKNOWN_OPTION = "%s has no option %r"
MSG_ABSTRACT = "%s shouldn't be instantiated directly. Use 'H' or 'V' subclasses"

def unknownKind(kind) -> ConfigurationError:
  return ConfigurationError(MSG_UNKNOWN_KIND %kind, kind)
