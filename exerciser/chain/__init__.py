"""In-memory model of on-chain accounts, program-derived addresses and example programs."""