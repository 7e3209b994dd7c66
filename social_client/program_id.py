from solders.pubkey import Pubkey

PROGRAM_ID = Pubkey.from_string("7DGy2um3GUoptaPYbKfAknhvsjYt97noMKEcHZw7Eqgf")
