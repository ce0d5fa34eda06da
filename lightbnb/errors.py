# lightbnb/errors.py
import psycopg

class DatabaseError(Exception):
    pass

class IntegrityError(DatabaseError):
    pass

class StoreUnavailableError(DatabaseError):
    pass

def from_psycopg_error(error: psycopg.Error) -> DatabaseError:
    # PoolTimeout and PoolClosed subclass OperationalError
    if isinstance(error, psycopg.IntegrityError):
        return IntegrityError(str(error))
    if isinstance(error, psycopg.OperationalError):
        return StoreUnavailableError(str(error))
    return DatabaseError(str(error))
