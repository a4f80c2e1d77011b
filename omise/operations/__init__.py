"""Operation objects: the endpoint, method, path and request body of each API call."""