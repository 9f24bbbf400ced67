from rop_validator.main import main

main()
