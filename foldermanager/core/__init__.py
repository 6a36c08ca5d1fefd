# foldermanager/core — leaf modules: constants and exceptions.
