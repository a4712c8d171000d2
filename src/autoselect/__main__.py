from autoselect.main import run

if __name__ == "__main__":
    run()
