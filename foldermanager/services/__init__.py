# foldermanager/services — interactive confirmation, provisioning, shell opening.
